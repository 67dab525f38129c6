"""Cliente asíncrono de la API del registry (Onename/Blockstack v1).

Responsabilidad:
- Construir requests con autenticación Basic consistente.
- Enviar cada operación por un `httpx.AsyncClient` compartido.
- Entregar el resultado crudo (`RegistryResult`) sin interpretarlo.

Notas:
- Sin reintentos, cache ni validación de inputs: el servicio decide.
- `update_user` y `transfer_user` comparten endpoint; el servicio distingue
  por las claves del body.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Sequence

import httpx

from adapters.http_client import build_async_client
from adapters.request_builder import build_request
from core.config import AppSettings
from core.domain.errors import (
    BlockstackError,
    MissingCredentialsError,
    SerializationError,
    TransportError,
)
from core.domain.models import Credentials, Endpoints
from core.domain.results import RegistryResult
from core.interfaces.completion import CompletionHandler

logger = logging.getLogger(__name__)


class BlockstackClient:
    """Cliente del registry con credenciales inmutables inyectadas.

    Uso típico:

        async with BlockstackClient(Credentials(app_id=..., app_secret=...)) as client:
            result = await client.lookup(["muneeb", "ryan"])
            if result.ok:
                data = result.json()
    """

    def __init__(
        self,
        credentials: Credentials,
        endpoints: Endpoints | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._credentials = credentials
        self._endpoints = endpoints or Endpoints()
        self._settings = settings
        self._http = http_client
        # Solo cerramos el cliente httpx si lo creamos nosotros.
        self._owns_http = http_client is None
        self._pending: set[asyncio.Task[RegistryResult]] = set()

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> "BlockstackClient":
        settings = settings or AppSettings()
        return cls(
            settings.credentials(),
            settings.endpoints(),
            http_client=http_client,
            settings=settings,
        )

    @property
    def endpoints(self) -> Endpoints:
        return self._endpoints

    async def __aenter__(self) -> "BlockstackClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Espera callbacks pendientes y cierra el cliente httpx propio."""

        try:
            if self._pending:
                await asyncio.gather(*self._pending)
        finally:
            if self._http is not None and self._owns_http:
                await self._http.aclose()
                self._http = None

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------

    async def lookup(self, users: Sequence[str]) -> RegistryResult:
        """Looks up one or more users by username.

        The payload has a top-level key per username, each with "profile" and
        "verifications".
        """

        return await self._send("GET", f"{self._endpoints.users}/{','.join(users)}")

    async def search(self, query: str) -> RegistryResult:
        """Searches usernames, full names and twitter handles.

        Prefixed queries (`twitter:itsProf`, `github:shea256`, `domain:muneebali.com`)
        target verified accounts. The query is sent unescaped.
        """

        return await self._send("GET", f"{self._endpoints.search}{query}")

    async def register_user(
        self,
        username: str,
        recipient_address: str,
        profile_data: dict[str, Any] | None = None,
    ) -> RegistryResult:
        """Registers a username; the response may carry an "unsigned_tx" in hex."""

        params: dict[str, Any] = {"username": username, "recipient_address": recipient_address}
        if profile_data is not None:
            params["profile"] = profile_data
        return await self._send("POST", self._endpoints.users, params)

    async def update_user(
        self,
        username: str,
        profile_data: dict[str, Any],
        owner_public_key: str,
    ) -> RegistryResult:
        """Updates the profile bound to a username (response may carry "unsigned_tx")."""

        params = {"profile": profile_data, "owner_pubkey": owner_public_key}
        return await self._send("POST", self._update_url(username), params)

    async def transfer_user(
        self,
        username: str,
        transfer_address: str,
        owner_public_key: str,
    ) -> RegistryResult:
        """Transfers a username to another Bitcoin address."""

        params = {"transfer_address": transfer_address, "owner_pubkey": owner_public_key}
        return await self._send("POST", self._update_url(username), params)

    async def all_users(self) -> RegistryResult:
        """Returns "stats" (with a running "registrations" count) and "usernames"."""

        return await self._send("GET", self._endpoints.users)

    # ------------------------------------------------------------------
    # Transaction operations
    # ------------------------------------------------------------------

    async def broadcast_transaction(self, signed_transaction: str) -> RegistryResult:
        """Broadcasts a signed transaction (hex); the response carries the tx hash."""

        return await self._send("POST", self._endpoints.transactions, {"signed_hex": signed_transaction})

    # ------------------------------------------------------------------
    # Address operations
    # ------------------------------------------------------------------

    async def unspent_outputs(self, address: str) -> RegistryResult:
        return await self._send("GET", f"{self._endpoints.addresses}/{address}/unspents")

    async def names_owned(self, address: str) -> RegistryResult:
        return await self._send("GET", f"{self._endpoints.addresses}/{address}/names")

    # ------------------------------------------------------------------
    # Domain operations
    # ------------------------------------------------------------------

    async def dkim_public_key(self, domain: str) -> RegistryResult:
        """DKIM public key from the "blockchainid._domainkey" DNS record of `domain`."""

        return await self._send("GET", f"{self._endpoints.domains}/{domain}/dkim")

    # ------------------------------------------------------------------
    # Callback delivery
    # ------------------------------------------------------------------

    def submit(
        self,
        operation: Awaitable[RegistryResult],
        callback: CompletionHandler,
    ) -> asyncio.Task[RegistryResult]:
        """Programa `operation` y llama `callback(payload, error)` al terminar.

        Debe llamarse con un event loop activo. Devuelve la task para quien
        quiera esperarla; si no, `aclose()` la espera.
        """

        async def run() -> RegistryResult:
            try:
                result = await operation
            except Exception as exc:
                logger.exception("Scheduled operation failed")
                error = BlockstackError(str(exc) or exc.__class__.__name__)
                error.__cause__ = exc
                result = RegistryResult(error=error)
            callback(result.payload, result.error)
            return result

        task = asyncio.get_running_loop().create_task(run())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _update_url(self, username: str) -> str:
        return f"{self._endpoints.users}/{username}/update"

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = build_async_client(self._settings)
            self._owns_http = True
        return self._http

    async def _send(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> RegistryResult:
        try:
            request = build_request(
                method=method,
                url=url,
                credentials=self._credentials,
                params=params,
            )
        except MissingCredentialsError as exc:
            logger.error("Not sending %s %s: %s", method, url, exc)
            return RegistryResult(error=exc)
        except SerializationError as exc:
            logger.warning("Not sending %s %s: %s", method, url, exc)
            return RegistryResult(error=exc)

        logger.debug("%s %s", request.method, request.url)
        try:
            response = await self._client().request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except (httpx.HTTPError, httpx.InvalidURL, RuntimeError) as exc:
            # RuntimeError: httpx refuses to send through a closed client.
            logger.warning("%s %s failed: %s", method, url, exc)
            error = TransportError(str(exc) or exc.__class__.__name__)
            error.__cause__ = exc
            return RegistryResult(error=error, request=request)

        logger.debug("%s %s -> HTTP %s", method, url, response.status_code)
        return RegistryResult(
            payload=response.content,
            status_code=response.status_code,
            request=request,
        )

"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Credenciales y endpoints son objetos de valor inmutables (`frozen=True`):
  se inyectan en el cliente al construirlo, no hay estado global.
- `SecretStr` evita que el app secret aparezca en logs o `repr()`.

Nota:
- Estos modelos describen *qué* configura el cliente, no *cómo* se envía.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr
from pydantic.config import ConfigDict

DEFAULT_API_BASE_URL = "https://api.onename.com/v1"


class Credentials(BaseModel):
    """Par (app id, app secret) de la API de Onename.

    Ambos campos son opcionales a nivel de modelo: la ausencia se detecta al
    derivar la cabecera `Authorization`, no al construir.
    """

    model_config = ConfigDict(frozen=True)

    app_id: str | None = Field(
        default=None,
        description="App id obtenido en la consola de la API.",
    )
    app_secret: SecretStr | None = Field(
        default=None,
        description="App secret asociado al app id.",
    )

    @property
    def is_complete(self) -> bool:
        return bool(self.app_id) and bool(self.secret_value)

    @property
    def secret_value(self) -> str | None:
        if self.app_secret is None:
            return None
        return self.app_secret.get_secret_value()


class Endpoints(BaseModel):
    """URLs base de cada familia de endpoints.

    `search` termina en `?query=` porque la consulta se concatena tal cual.
    """

    model_config = ConfigDict(frozen=True)

    users: str = Field(default=f"{DEFAULT_API_BASE_URL}/users", min_length=1)
    search: str = Field(default=f"{DEFAULT_API_BASE_URL}/search?query=", min_length=1)
    transactions: str = Field(default=f"{DEFAULT_API_BASE_URL}/transactions", min_length=1)
    addresses: str = Field(default=f"{DEFAULT_API_BASE_URL}/addresses", min_length=1)
    domains: str = Field(default=f"{DEFAULT_API_BASE_URL}/domains", min_length=1)

    @classmethod
    def from_base_url(cls, base_url: str) -> "Endpoints":
        """Deriva las cinco familias desde la raíz de la API (p.ej. un mirror)."""

        root = base_url.rstrip("/")
        return cls(
            users=f"{root}/users",
            search=f"{root}/search?query=",
            transactions=f"{root}/transactions",
            addresses=f"{root}/addresses",
            domains=f"{root}/domains",
        )

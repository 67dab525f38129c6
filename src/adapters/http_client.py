"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers comunes del registry.
- Facilita testeo: se puede pasar un `httpx.MockTransport`.

Sin `follow_redirects`: un 3xx llega al caller como payload; un POST
redirigido no se reenvía como GET sin body.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

JSON_CONTENT_TYPE = "application/json"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeout/User-Agent para que todas las operaciones se comporten igual.
    - La cabecera `Authorization` NO va aquí: se deriva por request.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": JSON_CONTENT_TYPE,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )

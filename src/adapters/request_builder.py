"""Construcción de requests del registry.

Funciones puras (sin I/O):
- `authorization_value`: cabecera Basic a partir de las credenciales.
- `encode_json_body`: serializa parámetros a JSON o lanza `SerializationError`.
- `build_request`: ensambla método, URL, headers y body.
"""

from __future__ import annotations

import base64
import json
from typing import Any, Mapping

from adapters.http_client import JSON_CONTENT_TYPE
from core.domain.errors import MissingCredentialsError, SerializationError
from core.domain.models import Credentials
from core.domain.results import RegistryRequest


def authorization_value(credentials: Credentials) -> str:
    """Devuelve `"Basic <base64(app_id:app_secret)>"`.

    Credenciales ausentes o vacías no se "stringifican": se rechazan.
    """

    app_id = credentials.app_id
    app_secret = credentials.secret_value
    if not app_id:
        raise MissingCredentialsError("app_id is not set")
    if not app_secret:
        raise MissingCredentialsError("app_secret is not set")

    raw = f"{app_id}:{app_secret}".encode("utf-8")
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


def encode_json_body(params: Mapping[str, Any]) -> bytes:
    """Serializa `params` como objeto JSON UTF-8.

    `allow_nan=False` porque NaN/Infinity no son JSON válido (RFC 8259).
    """

    try:
        text = json.dumps(dict(params), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Parameters are not JSON serializable: {exc}") from exc
    return text.encode("utf-8")


def build_request(
    *,
    method: str,
    url: str,
    credentials: Credentials,
    params: Mapping[str, Any] | None = None,
) -> RegistryRequest:
    headers = {
        "Authorization": authorization_value(credentials),
        "Content-Type": JSON_CONTENT_TYPE,
    }
    body = encode_json_body(params) if params is not None else None
    return RegistryRequest(method=method, url=url, headers=headers, body=body)

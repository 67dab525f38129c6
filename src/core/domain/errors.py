"""Taxonomía de errores del cliente.

Por qué una jerarquía propia:
- Los callers distinguen credenciales ausentes, bodies no serializables y
  fallos de red sin depender de excepciones de httpx o de `json`.
- Los errores de negocio del servicio (404, 401, ...) NO viven aquí: llegan
  como payload normal y los interpreta el caller.
"""

from __future__ import annotations


class BlockstackError(Exception):
    """Base class for all client errors."""


class MissingCredentialsError(BlockstackError, ValueError):
    """Raised when the app id or app secret is absent or empty."""


class SerializationError(BlockstackError, ValueError):
    """Raised when request parameters cannot be encoded as a JSON object."""


class TransportError(BlockstackError, ConnectionError):
    """Raised when the HTTP request fails before a response is received.

    The underlying `httpx.HTTPError` is kept as `__cause__`.
    """

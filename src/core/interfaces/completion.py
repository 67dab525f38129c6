"""Contrato del callback de finalización.

Por qué Protocol:
- Cualquier callable `(payload, error) -> None` sirve (funciones, métodos,
  lambdas, mocks) sin herencia.
- Documenta la garantía: se invoca exactamente una vez por operación.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.errors import BlockstackError


@runtime_checkable
class CompletionHandler(Protocol):
    """Recibe el resultado terminal de una operación programada con `submit`.

    Reglas:
    - `payload` es None si hubo error; puede ser b"" en un éxito vacío.
    - `error` es None si el servicio respondió (aunque sea con un 4xx/5xx).
    """

    def __call__(self, payload: bytes | None, error: BlockstackError | None) -> None:
        ...

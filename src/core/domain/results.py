"""Request y resultado de una operación contra el registry.

Por qué dataclasses (y no Pydantic):
- Son estructuras transitorias por llamada; no validan input externo.
- `RegistryResult` transporta una excepción, que Pydantic no modela bien.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from core.domain.errors import BlockstackError


@dataclass(frozen=True)
class RegistryRequest:
    """Request HTTP ya construido, listo para el transporte."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class RegistryResult:
    """Resultado terminal de una operación: payload crudo o error.

    - `payload` son los bytes tal cual los devolvió el servicio (puede ser b"").
    - `status_code` solo existe si hubo respuesta HTTP.
    - Los errores del servicio (JSON con status de error) llegan como payload.
    """

    payload: bytes | None = None
    error: BlockstackError | None = None
    status_code: int | None = None
    request: RegistryRequest | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def json(self) -> Any:
        """Decodifica el payload como JSON (conveniencia para el caller)."""

        if self.error is not None:
            raise self.error
        if not self.payload:
            return None
        return json.loads(self.payload.decode("utf-8"))

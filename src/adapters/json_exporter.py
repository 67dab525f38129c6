"""Exportación JSON de un resultado del registry.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar la respuesta cruda sin re-consultar la API.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.results import RegistryResult


def export_result_json(*, result: RegistryResult, output_path: Path) -> Path:
    """Exporta el payload a JSON UTF-8 con formato estable.

    Si el payload no es JSON válido se guarda tal cual (bytes decodificados).
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    raw = (result.payload or b"").decode("utf-8", errors="replace")
    try:
        payload = json.loads(raw) if raw else None
    except json.JSONDecodeError:
        output_path.write_text(raw, encoding="utf-8")
        return output_path

    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path

"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en múltiples comandos.
"""

from __future__ import annotations

import json

from rich.align import Align
from rich.console import Console, RenderableType
from rich.json import JSON
from rich.panel import Panel
from rich.text import Text

from core.domain.results import RegistryResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("BLOCKSTACK-D2", style="bold cyan")
    subtitle = Text("Registry de identidades • Nombres • Transacciones", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_result_panel(result: RegistryResult) -> Panel:
    """Panel con el payload (JSON resaltado si se puede decodificar)."""

    raw = (result.payload or b"").decode("utf-8", errors="replace")
    body: RenderableType
    try:
        body = JSON(raw) if raw else Text("(empty response)", style="dim")
    except json.JSONDecodeError:
        body = Text(raw)

    status = result.status_code
    border = "green" if status is not None and status < 400 else "yellow"
    title = Text(f"HTTP {status}", style=f"bold {border}")
    subtitle = None
    if result.request is not None:
        subtitle = f"{result.request.method} {result.request.url}"
    return Panel(body, title=title, subtitle=subtitle, border_style=border)


def build_error_panel(result: RegistryResult) -> Panel:
    error = result.error
    kind = error.__class__.__name__ if error is not None else "Error"
    return Panel(Text(str(error)), title=Text(kind, style="bold red"), border_style="red")

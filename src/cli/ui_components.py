"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El comando solo conecta entrada, encoder y salida.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.lamp import Lamp
from core.domain.models import FiveRowDisplay, TimeOfDay

LAMP_STYLES: dict[Lamp, str] = {
    Lamp.OFF: "grey30",
    Lamp.YELLOW: "bold yellow",
    Lamp.RED: "bold red",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo con `--banner`)."""

    title = Text("BERLIN CLOCK", style="bold cyan")
    subtitle = Text("Mengenlehreuhr • seconds • hours • minutes", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_display_panel(display: FiveRowDisplay, time: TimeOfDay, glyph: str = "●") -> Panel:
    """Panel with one line per row, each lamp drawn in its color."""

    body = Text(justify="center")
    for index, row in enumerate(display.rows):
        if index:
            body.append("\n")
        for position, lamp in enumerate(row.lamps):
            if position:
                body.append(" ")
            body.append(glyph, style=LAMP_STYLES[lamp])

    title = Text(str(time), style="bold")
    return Panel(body, title=title, border_style="cyan", expand=False, padding=(1, 2))

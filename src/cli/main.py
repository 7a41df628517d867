"""CLI del reloj de Berlín (Typer).

Comandos:
- `convert HH:MM:SS`: muestra las lámparas para una hora dada.
- `now`: muestra las lámparas para la hora local actual.
- `doctor`: diagnóstico y configuración.

La CLI solo conecta entrada, settings y salida; la codificación vive en
`core.services.berlin_clock`.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from adapters.json_exporter import dumps_display, export_display_json
from cli import doctor
from cli.ui_components import build_display_panel, print_banner
from core.config import AppSettings
from core.domain.errors import ClockInputError
from core.domain.lamp import NewlineStyle
from core.logging import get_logger, init_logging
from core.services.berlin_clock import encode, parse, render

app = typer.Typer(no_args_is_help=True, help="Show a time of day as Berlin clock lamps.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to BERLIN_CLOCK_LOG_LEVEL.",
    ),
) -> None:
    settings = AppSettings()
    init_logging(log_level or settings.log_level)
    ctx.obj = settings


def _show(
    settings: AppSettings,
    text: str,
    *,
    plain: bool,
    as_json: bool,
    newline: Optional[NewlineStyle],
    output: Optional[Path],
    banner: bool = False,
) -> None:
    try:
        time = parse(text)
    except ClockInputError as exc:
        _err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
        raise typer.Exit(code=2) from exc

    display = encode(time)
    logger.info("Showing %s", time)

    if output is not None:
        path = export_display_json(display=display, time=time, output_path=output)
        _console.print(f"[green]Saved JSON to:[/green] {path}")
        return

    if as_json:
        typer.echo(dumps_display(display, time), nl=False)
        return

    if plain or not settings.color:
        separator = newline.separator if newline else settings.line_separator
        typer.echo(render(display, separator))
        return

    if banner:
        print_banner(_console)
    _console.print(build_display_panel(display, time, glyph=settings.lamp_glyph))


@app.command(context_settings={"ignore_unknown_options": True})
def convert(
    ctx: typer.Context,
    time_text: str = typer.Argument(
        ...,
        metavar="HH:MM:SS",
        help="Time of day, 00:00:00 to 24:59:59. Put it after `--` if it starts with a dash.",
    ),
    plain: bool = typer.Option(False, "--plain", help="Print Y/R/O text instead of colored lamps."),
    as_json: bool = typer.Option(False, "--json", help="Print the lamp rows as JSON."),
    newline: Optional[NewlineStyle] = typer.Option(
        None,
        "--newline",
        case_sensitive=False,
        help="Row separator for --plain output (defaults to BERLIN_CLOCK_NEWLINE).",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
    banner: bool = typer.Option(False, "--banner", help="Print the banner above the lamps."),
) -> None:
    """Show the lamps for HH:MM:SS."""

    _show(
        ctx.obj,
        time_text,
        plain=plain,
        as_json=as_json,
        newline=newline,
        output=output,
        banner=banner,
    )


@app.command()
def now(
    ctx: typer.Context,
    plain: bool = typer.Option(False, "--plain", help="Print Y/R/O text instead of colored lamps."),
    as_json: bool = typer.Option(False, "--json", help="Print the lamp rows as JSON."),
    newline: Optional[NewlineStyle] = typer.Option(None, "--newline", case_sensitive=False),
) -> None:
    """Show the lamps for the current local time."""

    text = datetime.now().strftime("%H:%M:%S")
    _show(ctx.obj, text, plain=plain, as_json=as_json, newline=newline, output=None)


def run() -> None:
    app()

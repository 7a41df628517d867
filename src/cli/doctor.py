"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.lamp import NewlineStyle
from core.services.berlin_clock import convert_time

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# Known-good conversions, rows joined with "/".
SELF_CHECKS: tuple[tuple[str, str], ...] = (
    ("00:00:00", "Y/OOOO/OOOO/OOOOOOOOOOO/OOOO"),
    ("13:17:01", "O/RROO/RRRO/YYROOOOOOOO/YYOO"),
    ("23:59:59", "O/RRRR/RRRO/YYRYYRYYRYY/YYYY"),
    ("24:00:00", "Y/RRRR/RRRR/OOOOOOOOOOO/OOOO"),
)


def _check_conversion(text: str, expected: str) -> tuple[bool, str]:
    actual = convert_time(text, "/")
    if actual == expected:
        return True, actual
    return False, f"expected {expected}, got {actual}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the active settings and run the encoder self-checks."""

    settings: AppSettings = ctx.obj or AppSettings()

    table = Table(title="Berlin Clock Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Newline", "OK", settings.newline.value)
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("Color", "OK", f"{settings.color} ({settings.lamp_glyph})")

    failures = 0
    for text, expected in SELF_CHECKS:
        ok, detail = _check_conversion(text, expected)
        if not ok:
            failures += 1
        table.add_row(f"Encode {text}", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failures:
        raise typer.Exit(code=1)


@app.command()
def setup(
    newline: NewlineStyle = typer.Option(
        NewlineStyle.LF,
        "--newline",
        case_sensitive=False,
        prompt="Row separator",
        help="Row separator for plain output.",
    ),
    color: bool = typer.Option(True, "--color/--no-color", prompt="Colored lamps", help="Draw colored lamps."),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Write here instead of the user config .env."),
) -> None:
    """Store display preferences in the user config .env."""

    env_path = write_user_env_vars(
        {
            "BERLIN_CLOCK_NEWLINE": newline.value,
            "BERLIN_CLOCK_COLOR": "true" if color else "false",
        },
        env_path=env_file,
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")

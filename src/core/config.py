"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los settings solo afectan a los bordes (render, logging); el encoder
  recibe todo lo que necesita como argumentos.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.lamp import NewlineStyle


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "berlin-clock"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "berlin-clock"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "berlin-clock"
    return Path.home() / ".config" / "berlin-clock"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env, keeping other keys."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# berlin-clock user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Order: project `.env` first (dev), then the user's global config `.env`.
    Environment variables (`BERLIN_CLOCK_*`) win over both.
    """

    model_config = SettingsConfigDict(
        env_prefix="BERLIN_CLOCK_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    newline: NewlineStyle = Field(
        default_factory=NewlineStyle.default,
        description="Row separator for text output (lf/crlf/native).",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Logging level name (DEBUG, INFO, WARNING, ERROR).",
    )
    color: bool = Field(
        default=True,
        description="Draw colored lamps in the terminal instead of Y/R/O text.",
    )
    lamp_glyph: str = Field(
        default="●",
        min_length=1,
        max_length=1,
        description="Character drawn for each lamp in colored output.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def line_separator(self) -> str:
        return self.newline.separator

"""Logging del proyecto (stdlib `logging`).

- Los logs van a stderr: stdout queda libre para la salida `--plain`/`--json`.
- Los módulos piden su logger con `get_logger(__name__)`; solo la CLI
  llama a `init_logging`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(log_file: Optional[Union[str, Path]]) -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    return handlers


def init_logging(level: str = "WARNING", log_file: Optional[Union[str, Path]] = None) -> None:
    """Configure the root logger, replacing handlers from earlier calls.

    Parameters
    ----------
    level: str
        Level name ("DEBUG", "INFO", ...); unknown names fall back to WARNING.
    log_file: Optional[str | Path]
        Also write records to this file (truncated on start).
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logging.basicConfig(level=numeric_level, handlers=_build_handlers(log_file), force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Module logger; handlers come from `init_logging`."""
    return logging.getLogger(name or "berlin_clock")

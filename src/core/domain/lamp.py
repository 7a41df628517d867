"""Lamp and newline vocabularies for the Berlin clock.

This module centralizes the small enumerations shared by the encoder, the
settings and the CLI. Keeping them in the domain layer lets every layer
use a single source of truth without importing from adapters.
"""

from __future__ import annotations

import os
from enum import Enum


class Lamp(str, Enum):
    """Color state of a single lamp cell, valued by its one-character code."""

    OFF = "O"
    YELLOW = "Y"
    RED = "R"

    @property
    def is_lit(self) -> bool:
        return self is not Lamp.OFF


class NewlineStyle(str, Enum):
    """Line separator used when rows are joined into text."""

    LF = "lf"
    CRLF = "crlf"
    NATIVE = "native"

    @classmethod
    def default(cls) -> "NewlineStyle":
        return cls.LF

    @property
    def separator(self) -> str:
        if self is NewlineStyle.CRLF:
            return "\r\n"
        if self is NewlineStyle.NATIVE:
            return os.linesep
        return "\n"

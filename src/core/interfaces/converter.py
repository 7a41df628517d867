"""Contrato de conversión de hora.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Cualquier objeto con un `convert_time` compatible sustituye al encoder
  (tests, renderers alternativos).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TimeConverter(Protocol):
    """Minimal contract for turning a `HH:MM:SS` string into clock text.

    Rules:
    - `convert_time` is synchronous and side-effect free.
    - Invalid input raises a `ClockInputError` subclass, never returns partial text.
    """

    def convert_time(self, text: str | None) -> str:
        """Convert `text` and return the rendered rows."""

        ...

"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos son inmutables (frozen): un display se produce una vez y
  pasa a ser del llamador.

Nota:
- Estos modelos describen *qué* muestra un reloj de Berlín, no *cómo*
  se calcula (ver `core.services.berlin_clock`).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.lamp import Lamp

MAX_HOURS = 24
MAX_MINUTES = 59
MAX_SECONDS = 59

SECONDS_ROW_LENGTH = 1
HOURS_FIVE_ROW_LENGTH = 4
HOURS_ONE_ROW_LENGTH = 4
MINUTES_FIVE_ROW_LENGTH = 11
MINUTES_ONE_ROW_LENGTH = 4

ROW_LENGTHS = (
    SECONDS_ROW_LENGTH,
    HOURS_FIVE_ROW_LENGTH,
    HOURS_ONE_ROW_LENGTH,
    MINUTES_FIVE_ROW_LENGTH,
    MINUTES_ONE_ROW_LENGTH,
)


class TimeOfDay(BaseModel):
    """A validated clock reading.

    `hours` accepts 24 so that `24:00:00` can be displayed.
    """

    model_config = ConfigDict(frozen=True)

    hours: int = Field(
        ...,
        ge=0,
        le=MAX_HOURS,
        description="Hours, 0..24 inclusive.",
    )
    minutes: int = Field(
        ...,
        ge=0,
        le=MAX_MINUTES,
        description="Minutes, 0..59.",
    )
    seconds: int = Field(
        ...,
        ge=0,
        le=MAX_SECONDS,
        description="Seconds, 0..59.",
    )

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


class LampRow(BaseModel):
    """One row of lamps, in display order."""

    model_config = ConfigDict(frozen=True)

    lamps: tuple[Lamp, ...] = Field(
        ...,
        min_length=1,
        description="Lamp states from the left edge of the row.",
    )

    @classmethod
    def filled(cls, color: Lamp, lit: int, length: int) -> "LampRow":
        """First `lit` cells in `color`, the remaining `length - lit` cells OFF."""

        if not 0 <= lit <= length:
            raise ValueError(f"cannot light {lit} lamps in a row of {length}")
        return cls(lamps=(color,) * lit + (Lamp.OFF,) * (length - lit))

    @property
    def lit_count(self) -> int:
        return sum(1 for lamp in self.lamps if lamp.is_lit)

    @property
    def text(self) -> str:
        return "".join(lamp.value for lamp in self.lamps)

    def __len__(self) -> int:
        return len(self.lamps)

    def __str__(self) -> str:
        return self.text


class FiveRowDisplay(BaseModel):
    """The full clock face: five rows, top to bottom.

    Row lengths are fixed (1, 4, 4, 11, 4); only the lit cells vary.
    """

    model_config = ConfigDict(frozen=True)

    seconds: LampRow = Field(..., description="Seconds lamp, lit on even seconds.")
    hours_five: LampRow = Field(..., description="Each red lamp counts five hours.")
    hours_one: LampRow = Field(..., description="Each red lamp counts one hour.")
    minutes_five: LampRow = Field(
        ...,
        description="Each lamp counts five minutes; quarter lamps are red.",
    )
    minutes_one: LampRow = Field(..., description="Each yellow lamp counts one minute.")

    @model_validator(mode="after")
    def _check_row_lengths(self) -> "FiveRowDisplay":
        actual = tuple(len(row) for row in self.rows)
        if actual != ROW_LENGTHS:
            raise ValueError(f"row lengths must be {ROW_LENGTHS}, got {actual}")
        return self

    @property
    def rows(self) -> tuple[LampRow, LampRow, LampRow, LampRow, LampRow]:
        return (
            self.seconds,
            self.hours_five,
            self.hours_one,
            self.minutes_five,
            self.minutes_one,
        )

    def lines(self) -> list[str]:
        return [row.text for row in self.rows]

    def render(self, line_separator: str = "\n") -> str:
        """Text form: one row per line, no trailing separator."""

        return line_separator.join(self.lines())

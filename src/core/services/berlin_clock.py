"""Berlin clock encoding.

Turns a `HH:MM:SS` string into the five lamp rows of a Berlin clock
(Mengenlehreuhr):

    Y              seconds: on for even seconds
    RROO           hours, five per lamp
    RRRO           hours, one per lamp
    YYROOOOOOOO    minutes, five per lamp (quarters in red)
    YYOO           minutes, one per lamp

Everything here is a pure function of its arguments. Validation happens in
`parse` before any encoding; `encode` is total over valid `TimeOfDay`
values. The line separator is an argument of `render`, never a global.
"""

from __future__ import annotations

import re

from core.domain.errors import (
    MalformedFormatError,
    MissingInputError,
    NonNumericFieldError,
    OutOfRangeError,
)
from core.domain.lamp import Lamp
from core.domain.models import (
    HOURS_FIVE_ROW_LENGTH,
    HOURS_ONE_ROW_LENGTH,
    MAX_HOURS,
    MAX_MINUTES,
    MAX_SECONDS,
    MINUTES_FIVE_ROW_LENGTH,
    MINUTES_ONE_ROW_LENGTH,
    FiveRowDisplay,
    LampRow,
    TimeOfDay,
)
from core.logging import get_logger

logger = get_logger(__name__)

FIELD_SEPARATOR = ":"
QUARTER_POSITIONS = (2, 5, 8)

# Optional sign then ASCII digits; int() alone would also take spaces,
# underscores and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_FIELDS = (
    ("hours", MAX_HOURS),
    ("minutes", MAX_MINUTES),
    ("seconds", MAX_SECONDS),
)


def _parse_field(name: str, raw: str) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        raise NonNumericFieldError(name, raw)
    return int(raw)


def parse(text: str | None) -> TimeOfDay:
    """Validate `text` and return the time it describes.

    Raises, in this order of checks:
    - `MissingInputError` for `None` or an empty string.
    - `MalformedFormatError` unless there are exactly three `:`-separated fields.
    - `NonNumericFieldError` for a field that is not an integer.
    - `OutOfRangeError` for hours outside 0..24 or minutes/seconds outside 0..59.
    """

    if text is None or text == "":
        logger.debug("Rejected time: no input")
        raise MissingInputError()

    parts = text.split(FIELD_SEPARATOR)
    if len(parts) != len(_FIELDS):
        logger.debug("Rejected time %r: %d fields", text, len(parts))
        raise MalformedFormatError(text)

    values = [_parse_field(name, raw) for (name, _), raw in zip(_FIELDS, parts)]

    for (name, high), value in zip(_FIELDS, values):
        if not 0 <= value <= high:
            logger.debug("Rejected time %r: %s=%d", text, name, value)
            raise OutOfRangeError(name, value, 0, high)

    hours, minutes, seconds = values
    return TimeOfDay(hours=hours, minutes=minutes, seconds=seconds)


def seconds_row(seconds: int) -> LampRow:
    return LampRow(lamps=(Lamp.YELLOW if seconds % 2 == 0 else Lamp.OFF,))


def hours_five_row(hours: int) -> LampRow:
    return LampRow.filled(Lamp.RED, hours // 5, HOURS_FIVE_ROW_LENGTH)


def hours_one_row(hours: int) -> LampRow:
    return LampRow.filled(Lamp.RED, hours % 5, HOURS_ONE_ROW_LENGTH)


def minutes_five_row(minutes: int) -> LampRow:
    """Yellow five-minute lamps; the lit quarter-hour lamps turn red."""

    base = LampRow.filled(Lamp.YELLOW, minutes // 5, MINUTES_FIVE_ROW_LENGTH)
    return LampRow(
        lamps=tuple(
            Lamp.RED if index in QUARTER_POSITIONS and lamp is Lamp.YELLOW else lamp
            for index, lamp in enumerate(base.lamps)
        )
    )


def minutes_one_row(minutes: int) -> LampRow:
    return LampRow.filled(Lamp.YELLOW, minutes % 5, MINUTES_ONE_ROW_LENGTH)


def encode(time: TimeOfDay) -> FiveRowDisplay:
    """Build the five rows for `time`."""

    display = FiveRowDisplay(
        seconds=seconds_row(time.seconds),
        hours_five=hours_five_row(time.hours),
        hours_one=hours_one_row(time.hours),
        minutes_five=minutes_five_row(time.minutes),
        minutes_one=minutes_one_row(time.minutes),
    )
    logger.debug("Encoded %s as %s", time, "/".join(display.lines()))
    return display


def render(display: FiveRowDisplay, line_separator: str = "\n") -> str:
    """Join the rows as `Y`/`R`/`O` text, no trailing separator."""

    return display.render(line_separator)


def convert_time(text: str | None, line_separator: str = "\n") -> str:
    return render(encode(parse(text)), line_separator)


class ClockEncoder:
    """`TimeConverter` bound to a line separator.

    Holds no state beyond the separator, so one instance can be shared
    freely between threads.
    """

    def __init__(self, line_separator: str = "\n") -> None:
        self.line_separator = line_separator

    def parse(self, text: str | None) -> TimeOfDay:
        return parse(text)

    def encode(self, time: TimeOfDay) -> FiveRowDisplay:
        return encode(time)

    def convert_time(self, text: str | None) -> str:
        return convert_time(text, self.line_separator)

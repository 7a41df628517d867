"""Input validation errors.

All of them describe caller input that cannot be turned into a time of day;
none of them is an internal fault. They derive from `ValueError` so callers
that only care about "bad value" can catch that.
"""

from __future__ import annotations


class ClockInputError(ValueError):
    """Base class for every rejected time string."""


class MissingInputError(ClockInputError):
    def __init__(self) -> None:
        super().__init__("No time provided")


class MalformedFormatError(ClockInputError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid time provided: {text!r} is not HH:MM:SS.")


class NonNumericFieldError(ClockInputError):
    def __init__(self, field: str, raw: str) -> None:
        self.field = field
        self.raw = raw
        super().__init__(f"Time values must be numeric: {field} is {raw!r}.")


class OutOfRangeError(ClockInputError):
    """A field parsed as an integer but falls outside its bounds."""

    def __init__(self, field: str, value: int, low: int, high: int) -> None:
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        super().__init__(
            f"{field.capitalize()} out of bounds: {value} not in [{low}, {high}]."
        )

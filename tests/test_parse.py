import pytest

from core.domain.errors import (
    ClockInputError,
    MalformedFormatError,
    MissingInputError,
    NonNumericFieldError,
    OutOfRangeError,
)
from core.domain.models import TimeOfDay
from core.services.berlin_clock import parse


def test_parse_valid_time():
    assert parse("13:17:01") == TimeOfDay(hours=13, minutes=17, seconds=1)


def test_parse_single_digit_fields():
    assert parse("1:2:3") == TimeOfDay(hours=1, minutes=2, seconds=3)


@pytest.mark.parametrize("text", ["00:00:00", "24:00:00", "24:59:59", "23:59:59"])
def test_parse_accepts_bounds(text):
    parse(text)


def test_parse_hour_24_is_accepted():
    assert parse("24:00:00").hours == 24


def test_parse_explicit_plus_sign():
    assert parse("+5:00:00").hours == 5


@pytest.mark.parametrize("text", [None, ""])
def test_parse_missing_input(text):
    with pytest.raises(MissingInputError, match="No time provided"):
        parse(text)


@pytest.mark.parametrize("text", ["12:30", "12", "1:2:3:4", "12-30-00", ":"])
def test_parse_wrong_field_count(text):
    with pytest.raises(MalformedFormatError):
        parse(text)


@pytest.mark.parametrize(
    "text, field",
    [
        ("12:ab:00", "minutes"),
        ("xx:00:00", "hours"),
        ("12:00:1.5", "seconds"),
        (" 5:00:00", "hours"),
        ("1_0:00:00", "hours"),
        ("::", "hours"),
        ("٣:00:00", "hours"),
    ],
)
def test_parse_non_numeric_field(text, field):
    with pytest.raises(NonNumericFieldError) as excinfo:
        parse(text)
    assert excinfo.value.field == field
    assert "numeric" in str(excinfo.value)


@pytest.mark.parametrize(
    "text, field, value",
    [
        ("25:00:00", "hours", 25),
        ("-1:00:00", "hours", -1),
        ("12:60:00", "minutes", 60),
        ("12:00:60", "seconds", 60),
        ("12:-5:00", "minutes", -5),
    ],
)
def test_parse_out_of_range(text, field, value):
    with pytest.raises(OutOfRangeError) as excinfo:
        parse(text)
    assert excinfo.value.field == field
    assert excinfo.value.value == value
    assert "out of bounds" in str(excinfo.value)


def test_hours_checked_before_minutes():
    with pytest.raises(OutOfRangeError) as excinfo:
        parse("99:99:99")
    assert excinfo.value.field == "hours"


def test_numeric_check_precedes_range_check():
    with pytest.raises(NonNumericFieldError):
        parse("25:ab:00")


def test_all_errors_are_value_errors():
    for text in (None, "1:2", "a:b:c", "30:00:00"):
        with pytest.raises(ClockInputError):
            parse(text)
        with pytest.raises(ValueError):
            parse(text)

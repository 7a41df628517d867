import os

import pytest
from pydantic import ValidationError

from core.domain.lamp import Lamp, NewlineStyle
from core.domain.models import FiveRowDisplay, LampRow, TimeOfDay


def test_time_of_day_str_is_zero_padded():
    assert str(TimeOfDay(hours=7, minutes=5, seconds=9)) == "07:05:09"


def test_time_of_day_rejects_out_of_range():
    with pytest.raises(ValidationError):
        TimeOfDay(hours=25, minutes=0, seconds=0)


def test_time_of_day_is_frozen(afternoon):
    with pytest.raises(ValidationError):
        afternoon.hours = 2


def test_filled_row():
    row = LampRow.filled(Lamp.RED, 3, 4)
    assert row.text == "RRRO"
    assert row.lit_count == 3
    assert len(row) == 4


def test_filled_row_rejects_overflow():
    with pytest.raises(ValueError):
        LampRow.filled(Lamp.YELLOW, 5, 4)


def test_row_accepts_lamp_codes():
    row = LampRow(lamps=("Y", "R", "O"))
    assert row.lamps == (Lamp.YELLOW, Lamp.RED, Lamp.OFF)
    assert str(row) == "YRO"


def test_display_rejects_wrong_row_length():
    with pytest.raises(ValidationError):
        FiveRowDisplay(
            seconds=LampRow.filled(Lamp.YELLOW, 1, 1),
            hours_five=LampRow.filled(Lamp.OFF, 0, 4),
            hours_one=LampRow.filled(Lamp.OFF, 0, 4),
            minutes_five=LampRow.filled(Lamp.OFF, 0, 4),
            minutes_one=LampRow.filled(Lamp.OFF, 0, 4),
        )


def test_only_off_is_unlit():
    assert not Lamp.OFF.is_lit
    assert Lamp.YELLOW.is_lit
    assert Lamp.RED.is_lit


def test_newline_separators():
    assert NewlineStyle.LF.separator == "\n"
    assert NewlineStyle.CRLF.separator == "\r\n"
    assert NewlineStyle.NATIVE.separator == os.linesep
    assert NewlineStyle.default() is NewlineStyle.LF

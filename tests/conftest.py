"""
Pytest configuration and shared fixtures.

`src/` is put on the path by the `pythonpath` setting in pyproject.toml.
"""

import logging
from typing import Generator

import pytest

from core.domain.models import TimeOfDay
from core.services.berlin_clock import ClockEncoder


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Undo `init_logging` calls made by CLI tests so handlers bound to
    captured streams do not leak into later tests.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """
    Run with no BERLIN_CLOCK_* variables and no project .env in the cwd.
    """
    for name in ("NEWLINE", "LOG_LEVEL", "COLOR", "LAMP_GLYPH"):
        monkeypatch.delenv(f"BERLIN_CLOCK_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def encoder() -> ClockEncoder:
    return ClockEncoder()


@pytest.fixture
def afternoon() -> TimeOfDay:
    return TimeOfDay(hours=13, minutes=17, seconds=1)

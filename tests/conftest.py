from __future__ import annotations

from collections.abc import Generator
from zoneinfo import ZoneInfo

import pytest

from tzinstant.parser import InstantParser, reset_default_parser

NEW_YORK = "America/New_York"


@pytest.fixture(autouse=True)
def clean_default_parser() -> Generator[None, None, None]:
    """
    Every test starts without a process-wide parser and leaves none behind.
    Automatically applied to all tests.
    """
    reset_default_parser()
    yield
    reset_default_parser()


@pytest.fixture
def new_york() -> ZoneInfo:
    return ZoneInfo(NEW_YORK)


@pytest.fixture
def parser() -> InstantParser:
    """A parser with a New York local zone and both default formats."""
    return InstantParser(NEW_YORK)

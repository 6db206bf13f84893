"""Pytest configuration and fixtures for Chronofmt tests."""

from __future__ import annotations

import datetime
import sys
import time
from pathlib import Path
from typing import Callable, Iterator

import pytest

# Add the parent directory to sys.path so chronofmt can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chronofmt import FormatterContext, set_default_context  # noqa: E402

# POSIX zone strings need no tz database: UTC+2 in winter, UTC+3 in summer
KYIV_TZ = "EET-2EEST,M3.5.0/3,M10.5.0/4"


@pytest.fixture
def context() -> FormatterContext:
    """A fresh context, independent of the shared default."""
    return FormatterContext()


@pytest.fixture
def sample_datetime() -> datetime.datetime:
    """Naive local instant 2024-08-09T14:30:05.123 (a Friday)."""
    return datetime.datetime(2024, 8, 9, 14, 30, 5, 123000)


@pytest.fixture(autouse=True)
def fresh_default_context() -> Iterator[None]:
    """Give every test its own shared default context."""
    set_default_context(None)
    yield
    set_default_context(None)


@pytest.fixture
def host_zone(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], None]]:
    """Switch the process local zone through TZ and time.tzset()."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    def switch(spec: str) -> None:
        monkeypatch.setenv("TZ", spec)
        time.tzset()

    yield switch
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def kyiv_zone(host_zone: Callable[[str], None]) -> None:
    """Run with the host local zone at UTC+2 (winter) / UTC+3 (summer)."""
    host_zone(KYIV_TZ)

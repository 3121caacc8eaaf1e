"""
Shared test fixtures
"""

import time
import pytest


# POSIX form, no tzdata needed: local time is UTC+14 (Line Islands)
FAR_EAST_TZ = "LINT-14"


@pytest.fixture
def far_east_timezone(monkeypatch):
    """Run the test with the process local time zone set to UTC+14"""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", FAR_EAST_TZ)
    time.tzset()
    yield FAR_EAST_TZ
    monkeypatch.undo()
    time.tzset()

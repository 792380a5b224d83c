from datetime import UTC, datetime, timedelta, timezone

import pytest

from aeroclub.adapters.clock import FrozenClock
from aeroclub.adapters.tzdb import StaticZoneDatabase, ZoneInfoDatabase
from aeroclub.components.billing_cycle import CycleConfig


@pytest.fixture
def db() -> ZoneInfoDatabase:
    """Host IANA timezone database."""
    return ZoneInfoDatabase()


@pytest.fixture
def static_db() -> StaticZoneDatabase:
    """
    Fixed-offset zones, independent of the host database.
    """
    return StaticZoneDatabase(
        zones={
            "UTC": UTC,
            "Fixed/Plus12": timezone(timedelta(hours=12)),
            "Fixed/Minus0530": timezone(-timedelta(hours=5, minutes=30)),
        }
    )


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Frozen at 2026-01-06 20:00 UTC (2026-01-07 09:00 in Auckland)."""
    return FrozenClock(datetime(2026, 1, 6, 20, 0, tzinfo=UTC))


@pytest.fixture
def april_year() -> CycleConfig:
    """April 1 -> March 31 membership year."""
    return CycleConfig(start_month=4, start_day=1, end_month=3, end_day=31)


@pytest.fixture
def calendar_year() -> CycleConfig:
    """January 1 -> December 31 membership year."""
    return CycleConfig(start_month=1, start_day=1, end_month=12, end_day=31)

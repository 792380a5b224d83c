"""
Calendar-time invariants checked across real zones.

- Round trip: to_local(to_instant(d, t)) == (d, t) for every wall-clock time
  that exists in the zone
- Day length: day_range is 23, 23.5, 24, 24.5, 25 hours, never anything else,
  and consecutive days tile the timeline
- Weekday and day arithmetic do not depend on the process timezone
- Renewal expiry is strictly increasing and chains one year at a time
"""

from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta

import pytest

from aeroclub.components.billing_cycle import (
    CycleConfig,
    compute_cycle_containing,
    compute_default_expiry,
    compute_renewal_expiry,
)
from aeroclub.components.day_window import add_days, day_of_week, day_range
from aeroclub.components.zones import convert_to_instant, to_instant, to_local
from aeroclub.core.entities import LocalDate, LocalTime

ZONES = ["Pacific/Auckland", "Europe/London", "America/New_York", "Australia/Lord_Howe"]

# Sampled wall-clock times, including the hours DST transitions touch
TIMES = [LocalTime(h, m) for h in (0, 1, 2, 3, 12, 23) for m in (0, 30)]

# Days around each zone's 2026 transitions plus ordinary days
DATES = [
    LocalDate(2026, 1, 7),
    LocalDate(2026, 3, 8),
    LocalDate(2026, 3, 29),
    LocalDate(2026, 4, 5),
    LocalDate(2026, 9, 27),
    LocalDate(2026, 10, 4),
    LocalDate(2026, 10, 25),
    LocalDate(2026, 11, 1),
]

CONFIGS = [
    CycleConfig(start_month=4, start_day=1, end_month=3, end_day=31),
    CycleConfig(start_month=1, start_day=1, end_month=12, end_day=31),
    CycleConfig(start_month=7, start_day=1, end_month=6, end_day=30),
    CycleConfig(start_month=3, start_day=1, end_month=2, end_day=29),
    CycleConfig(start_month=4, start_day=1, end_month=6, end_day=30),
    CycleConfig(start_month=7, start_day=1, end_month=12, end_day=31),
]


# --- Round trip ---
@pytest.mark.parametrize("zone_id", ZONES)
def test_round_trip_for_existing_times(zone_id: str) -> None:
    """Every existing wall-clock time survives local -> instant -> local."""
    for local_date in DATES:
        for local_time in TIMES:
            result = convert_to_instant(local_date, local_time, zone_id)
            assert result.converged
            if result.resolution == "skipped":
                continue
            back = to_local(result.instant, zone_id)
            assert (back.date, back.time) == (local_date, local_time)


@pytest.mark.parametrize("zone_id", ZONES)
def test_skipped_times_land_after_requested_time(zone_id: str) -> None:
    """A skipped time resolves to a later wall-clock time on the same day."""
    for local_date in DATES:
        for local_time in TIMES:
            result = convert_to_instant(local_date, local_time, zone_id)
            if result.resolution != "skipped":
                continue
            back = to_local(result.instant, zone_id)
            assert back.date == local_date
            assert back.time > local_time


@pytest.mark.parametrize("zone_id", ZONES)
def test_instant_round_trip(zone_id: str) -> None:
    """to_instant(to_local(x)) == x, except the later half of a repeated hour."""
    start = datetime(2026, 1, 1, tzinfo=UTC)
    for step in range(0, 365 * 24, 7):
        instant = start + timedelta(hours=step)
        local = to_local(instant, zone_id)
        earlier = to_instant(local.date, local.time, zone_id)
        later = to_instant(local.date, local.time, zone_id, ambiguity="later")
        assert instant in (earlier, later)


# --- Day length ---
@pytest.mark.parametrize("zone_id", ZONES)
def test_day_lengths(zone_id: str) -> None:
    allowed = {23.0, 23.5, 24.0, 24.5, 25.0}
    day = LocalDate(2026, 1, 1)
    previous = day_range(day, zone_id)
    short_or_long = 0

    for _ in range(365):
        day = add_days(day, 1)
        current = day_range(day, zone_id)
        assert previous.end == current.start
        assert current.hours in allowed
        if current.hours != 24:
            short_or_long += 1
        previous = current

    assert short_or_long == 2


def test_known_transition_days() -> None:
    assert day_range(LocalDate(2026, 4, 5), "Pacific/Auckland").hours == 25
    assert day_range(LocalDate(2026, 9, 27), "Pacific/Auckland").hours == 23
    assert day_range(LocalDate(2026, 4, 5), "Australia/Lord_Howe").hours == 24.5
    assert day_range(LocalDate(2026, 10, 4), "Australia/Lord_Howe").hours == 23.5


# --- Process timezone independence ---
@pytest.mark.skipif(not hasattr(time, "tzset"), reason="time.tzset is not available")
@pytest.mark.parametrize("process_tz", ["UTC", "Pacific/Kiritimati", "Pacific/Pago_Pago"])
def test_weekday_ignores_process_timezone(
    monkeypatch: pytest.MonkeyPatch, process_tz: str
) -> None:
    monkeypatch.setenv("TZ", process_tz)
    time.tzset()
    try:
        assert day_of_week(LocalDate(2026, 1, 7)) == 3
        assert add_days(LocalDate(2026, 12, 31), 1) == LocalDate(2027, 1, 1)
        assert to_local(datetime(2026, 1, 6, 20, 0, tzinfo=UTC), "Pacific/Auckland").date == (
            LocalDate(2026, 1, 7)
        )
    finally:
        monkeypatch.undo()
        time.tzset()


# --- Cycles ---
@pytest.mark.parametrize("config", CONFIGS)
def test_renewal_is_monotonic(config: CycleConfig) -> None:
    expiry = compute_default_expiry(config, LocalDate(2024, 1, 15))
    for _ in range(12):
        renewed = compute_renewal_expiry(config, expiry)
        assert renewed > expiry
        assert renewed.year == expiry.year + 1
        expiry = renewed


@pytest.mark.parametrize("config", CONFIGS)
def test_every_day_in_exactly_its_cycle(config: CycleConfig) -> None:
    day = LocalDate(2023, 1, 1)
    for _ in range(3 * 366):
        window = compute_cycle_containing(config, day)
        assert window.start <= day <= window.end
        day = add_days(day, 1)

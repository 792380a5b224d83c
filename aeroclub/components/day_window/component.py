"""
Calendar day window component (CalendarDayWindow).

Local calendar-day arithmetic on top of the zones component.

Key behaviors:
- day_range: [local midnight, next local midnight) as UTC instants; never a
  fixed 24h span
- day_of_week / add_days: pure date arithmetic on a proleptic Gregorian day
  count, independent of any timezone (the process's own included)
"""

from __future__ import annotations

from datetime import datetime

from aeroclub.components.zones import TimeZoneDatabasePort, to_instant, to_local
from aeroclub.core.entities import MIDNIGHT, LocalDate

from .models import (
    AddDaysInput,
    AddDaysOutput,
    DayOfWeekInput,
    DayOfWeekOutput,
    DayRange,
    DayRangeInput,
)

# 1970-01-01 was a Thursday
_EPOCH_WEEKDAY = 4


def day_of_week(local_date: LocalDate) -> int:
    """Weekday of a calendar date, Sunday=0 .. Saturday=6."""
    return (local_date.day_number + _EPOCH_WEEKDAY) % 7


def add_days(local_date: LocalDate, days: int) -> LocalDate:
    """Shift a calendar date by whole local days."""
    return LocalDate.from_day_number(local_date.day_number + days)


def days_between(start: LocalDate, end: LocalDate) -> int:
    """Signed number of calendar days from start to end."""
    return end.day_number - start.day_number


def day_range(
    local_date: LocalDate,
    zone_id: str,
    *,
    db: TimeZoneDatabasePort | None = None,
) -> DayRange:
    """
    UTC range covering one local calendar day in zone_id.

    Args:
        local_date: Calendar date as observed in the zone
        zone_id: IANA zone id
        db: Timezone database (defaults to the host database)

    Returns:
        DayRange [start, end); 23h on a "spring forward" day, 25h on a
        "fall back" day, 24h otherwise
    """
    start = to_instant(local_date, MIDNIGHT, zone_id, db=db)
    end = to_instant(add_days(local_date, 1), MIDNIGHT, zone_id, db=db)
    return DayRange(start=start, end=end)


def is_instant_on_local_date(
    instant: datetime,
    local_date: LocalDate,
    zone_id: str,
    *,
    db: TimeZoneDatabasePort | None = None,
) -> bool:
    """True when instant falls on local_date in zone_id."""
    return to_local(instant, zone_id, db=db).date == local_date


# --- Component Entry Point ---


def run(
    inp: DayRangeInput | DayOfWeekInput | AddDaysInput,
    *,
    db: TimeZoneDatabasePort | None = None,
) -> DayRange | DayOfWeekOutput | AddDaysOutput:
    """
    Main entry point for the day window component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, DayRangeInput):
        return day_range(inp.local_date, inp.zone_id, db=db)
    elif isinstance(inp, DayOfWeekInput):
        return DayOfWeekOutput(day_of_week(inp.local_date))
    elif isinstance(inp, AddDaysInput):
        return AddDaysOutput(add_days(inp.local_date, inp.days))
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

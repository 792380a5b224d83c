"""
Business hours component.

Answers "is the business open" for the tenant zone's wall clock.

Key behaviors:
- Instants are localized with the zones component before comparison
- Open time inclusive, close time exclusive
- A close time at or before the open time means the hours run past midnight
"""

from __future__ import annotations

from datetime import datetime

from aeroclub.adapters.clock import SystemClock
from aeroclub.components.day_window import DayRange, add_days, day_range
from aeroclub.components.zones import ClockPort, TimeZoneDatabasePort, to_instant, to_local
from aeroclub.core.entities import LocalDate

from .models import BusinessHours, OpenCheckInput, OpenCheckOutput


def check_open(
    instant: datetime,
    hours: BusinessHours,
    zone_id: str,
    *,
    db: TimeZoneDatabasePort | None = None,
) -> OpenCheckOutput:
    """
    Check whether the business is open at instant.

    Args:
        instant: Absolute time to check
        hours: Tenant business hours
        zone_id: Tenant IANA zone id
        db: Timezone database (defaults to the host database)

    Returns:
        OpenCheckOutput with the local time that was compared
    """
    local_time = to_local(instant, zone_id, db=db).time

    if hours.is_closed:
        return OpenCheckOutput(False, local_time, "Business is closed")
    if hours.is_24_hours:
        return OpenCheckOutput(True, local_time, "Open 24 hours")

    opens, closes = hours.opens, hours.closes
    if hours.wraps_midnight:
        is_open = local_time >= opens or local_time < closes
    else:
        is_open = opens <= local_time < closes

    reason = f"Hours {opens}-{closes}, local time {local_time}"
    return OpenCheckOutput(is_open, local_time, reason)


def is_open_at(
    instant: datetime,
    hours: BusinessHours,
    zone_id: str,
    *,
    db: TimeZoneDatabasePort | None = None,
) -> bool:
    return check_open(instant, hours, zone_id, db=db).is_open


def is_open_now(
    hours: BusinessHours,
    zone_id: str,
    *,
    clock: ClockPort | None = None,
    db: TimeZoneDatabasePort | None = None,
) -> bool:
    clock = clock or SystemClock()
    return is_open_at(clock.now_utc(), hours, zone_id, db=db)


def opening_range(
    local_date: LocalDate,
    hours: BusinessHours,
    zone_id: str,
    *,
    db: TimeZoneDatabasePort | None = None,
) -> DayRange | None:
    """UTC range the business is open for hours starting on local_date (None if closed)."""
    if hours.is_closed:
        return None
    if hours.is_24_hours:
        return day_range(local_date, zone_id, db=db)

    close_date = add_days(local_date, 1) if hours.wraps_midnight else local_date
    return DayRange(
        start=to_instant(local_date, hours.opens, zone_id, db=db),
        end=to_instant(close_date, hours.closes, zone_id, db=db),
    )


def run(inp: OpenCheckInput, *, db: TimeZoneDatabasePort | None = None) -> OpenCheckOutput:
    """Main entry point for the business hours component."""
    if isinstance(inp, OpenCheckInput):
        return check_open(inp.instant, inp.hours, inp.zone_id, db=db)
    raise ValueError(f"Unknown input type: {type(inp)}")

"""
Roster availability component.

Checks proposed bookings (UTC instants) against instructors' recurring
local-time roster windows.

Key behaviors:
- Roster rules apply by local weekday and local effective dates
- Point checks (scheduler grid): start inclusive, end exclusive
- Interval checks (booking validation): the window must fully contain the
  booking; both ends inclusive, so a booking ending at 22:00 fits a rule
  ending at 22:00
- Bookings are localized into the tenant zone before comparison; a booking
  that runs past local midnight is never covered by a single-day rule
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from aeroclub.components.day_window import add_days, day_of_week
from aeroclub.components.zones import TimeZoneDatabasePort, to_local
from aeroclub.core.entities import MIDNIGHT, LocalDate

from .models import MinutesWindow, RosterCheckInput, RosterCheckOutput, RosterRule

logger = logging.getLogger(__name__)

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")

MINUTES_PER_DAY = 1440


def parse_time_to_minutes(value: str) -> int | None:
    """Parse "HH:MM" or "HH:MM:SS" into minutes since midnight, None if invalid."""
    match = _HHMM_RE.match(value.strip()) if value else None
    if not match:
        return None
    hh, mm = int(match.group(1)), int(match.group(2))
    if hh > 23 or mm > 59:
        return None
    return hh * 60 + mm


def rule_to_window(rule: RosterRule) -> MinutesWindow | None:
    start_min = parse_time_to_minutes(rule.start_time)
    end_min = parse_time_to_minutes(rule.end_time)
    if start_min is None or end_min is None:
        return None
    if end_min <= start_min:
        return None
    return MinutesWindow(start_min, end_min)


def is_minute_within_window(minutes: int, window: MinutesWindow) -> bool:
    return window.start_min <= minutes < window.end_min


def window_contains_interval(window: MinutesWindow, start_min: int, end_min: int) -> bool:
    return window.start_min <= start_min and window.end_min >= end_min


def _is_live(rule: RosterRule) -> bool:
    return rule.is_active and rule.voided_at is None


def rule_applies_on(rule: RosterRule, local_date: LocalDate) -> bool:
    """True when rule is live on local_date (weekday and effective range)."""
    if not _is_live(rule):
        return False
    if rule.day_of_week != day_of_week(local_date):
        return False
    if rule.effective_from is not None and rule.effective_from > local_date:
        return False
    if rule.effective_until is not None and rule.effective_until < local_date:
        return False
    return True


def build_availability_map(rules: Iterable[RosterRule]) -> dict[str, list[MinutesWindow]]:
    """Group live, well-formed rule windows by instructor."""
    availability: dict[str, list[MinutesWindow]] = {}
    for rule in rules:
        if not _is_live(rule):
            continue
        window = rule_to_window(rule)
        if window is None:
            continue
        availability.setdefault(rule.instructor_id, []).append(window)
    return availability


def rostered_instructor_ids(
    rules: Iterable[RosterRule],
    start_hhmm: str,
    end_hhmm: str,
) -> set[str]:
    """Instructors with a live rule window containing [start_hhmm, end_hhmm]."""
    start_min = parse_time_to_minutes(start_hhmm)
    end_min = parse_time_to_minutes(end_hhmm)
    if start_min is None or end_min is None:
        return set()
    return _eligible(rules, start_min, end_min)


def _eligible(rules: Iterable[RosterRule], start_min: int, end_min: int) -> set[str]:
    eligible: set[str] = set()
    for rule in rules:
        if not _is_live(rule):
            continue
        window = rule_to_window(rule)
        if window is None:
            logger.debug("Skipping roster rule %s with malformed window", rule.id)
            continue
        if window_contains_interval(window, start_min, end_min):
            eligible.add(rule.instructor_id)
    return eligible


def check_booking_against_roster(
    inp: RosterCheckInput,
    *,
    db: TimeZoneDatabasePort | None = None,
) -> RosterCheckOutput:
    """
    Find instructors rostered for the whole of a proposed booking.

    Args:
        inp: Booking instants, candidate roster rules and the tenant zone
        db: Timezone database (defaults to the host database)

    Returns:
        RosterCheckOutput for the booking's local start date
    """
    local_start = to_local(inp.start, inp.zone_id, db=db)
    local_end = to_local(inp.end, inp.zone_id, db=db)
    start_min = local_start.time.minutes

    if local_end.date == local_start.date:
        end_min = local_end.time.minutes
    elif local_end.date == add_days(local_start.date, 1) and local_end.time == MIDNIGHT:
        end_min = MINUTES_PER_DAY
    else:
        return RosterCheckOutput(
            local_date=local_start.date,
            start_min=start_min,
            end_min=local_end.time.minutes,
            crosses_midnight=True,
        )

    day_rules = [rule for rule in inp.rules if rule_applies_on(rule, local_start.date)]
    return RosterCheckOutput(
        local_date=local_start.date,
        start_min=start_min,
        end_min=end_min,
        rostered_instructor_ids=frozenset(_eligible(day_rules, start_min, end_min)),
    )


def run(inp: RosterCheckInput, *, db: TimeZoneDatabasePort | None = None) -> RosterCheckOutput:
    """Main entry point for the roster component."""
    if isinstance(inp, RosterCheckInput):
        return check_booking_against_roster(inp, db=db)
    raise ValueError(f"Unknown input type: {type(inp)}")

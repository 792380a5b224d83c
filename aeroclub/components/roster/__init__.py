"""
Roster component - instructor availability checks for bookings.
"""

from .component import (
    MINUTES_PER_DAY,
    build_availability_map,
    check_booking_against_roster,
    is_minute_within_window,
    parse_time_to_minutes,
    rostered_instructor_ids,
    rule_applies_on,
    rule_to_window,
    run,
    window_contains_interval,
)
from .models import MinutesWindow, RosterCheckInput, RosterCheckOutput, RosterRule

__all__ = [
    "MINUTES_PER_DAY",
    "build_availability_map",
    "check_booking_against_roster",
    "is_minute_within_window",
    "parse_time_to_minutes",
    "rostered_instructor_ids",
    "rule_applies_on",
    "rule_to_window",
    "run",
    "window_contains_interval",
    "MinutesWindow",
    "RosterCheckInput",
    "RosterCheckOutput",
    "RosterRule",
]

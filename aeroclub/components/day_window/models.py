"""
Calendar day window component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from aeroclub.core.entities import LocalDate, ensure_utc, format_instant

# Day-of-week numbering: Sunday=0 .. Saturday=6
WEEKDAY_NAMES: tuple[str, ...] = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)


@dataclass(frozen=True)
class DayRange:
    """
    UTC instants spanning one local calendar day, half-open [start, end).

    The span is 23, 24 or 25 hours depending on DST transitions that day.
    """

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def hours(self) -> float:
        return self.duration / timedelta(hours=1)

    def contains(self, instant: datetime) -> bool:
        return self.start <= ensure_utc(instant) < self.end

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """True when [start, end) intersects this day."""
        return ensure_utc(start) < self.end and ensure_utc(end) > self.start

    def as_iso(self) -> tuple[str, str]:
        return format_instant(self.start), format_instant(self.end)


@dataclass(frozen=True)
class DayRangeInput:
    local_date: LocalDate
    zone_id: str


@dataclass(frozen=True)
class DayOfWeekInput:
    local_date: LocalDate


@dataclass(frozen=True)
class DayOfWeekOutput:
    day_of_week: int

    @property
    def name(self) -> str:
        return WEEKDAY_NAMES[self.day_of_week]


@dataclass(frozen=True)
class AddDaysInput:
    local_date: LocalDate
    days: int


@dataclass(frozen=True)
class AddDaysOutput:
    local_date: LocalDate

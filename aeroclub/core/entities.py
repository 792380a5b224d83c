"""
Core value types for aeroclub calendar-time.

Key rules:
- Instants are timezone-aware UTC datetimes and are the only persisted form.
- LocalDate / LocalTime are derived at read time from an instant plus a zone id;
  they carry no zone and no UTC offset.
- CycleConfig is tenant configuration (membership/billing year boundaries).

Day arithmetic uses a proleptic Gregorian day count from 1970-01-01, so
calendar dates never pass through a host-local date/time object.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from aeroclub.core.errors import InvalidDateError

__all__ = [
    "EPOCH_ORDINAL",
    "CycleConfig",
    "CycleWindow",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "MIDNIGHT",
    "ensure_utc",
    "format_instant",
    "is_real_month_day",
    "parse_instant",
]

# 1970-01-01 as a proleptic Gregorian ordinal
EPOCH_ORDINAL = date(1970, 1, 1).toordinal()

# Leap reference year used to decide whether a recurring (month, day) exists
REFERENCE_LEAP_YEAR = 2024

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


# --- Calendar date ---


@dataclass(frozen=True, order=True)
class LocalDate:
    """A calendar date with no time-of-day and no zone."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"Month out of range: {self.month}", str(self))
        last = calendar.monthrange(self.year, self.month)[1]
        if not 1 <= self.day <= last:
            raise InvalidDateError(
                f"Day {self.day} does not exist in {self.year:04d}-{self.month:02d}",
                str(self),
            )

    @classmethod
    def parse(cls, value: str) -> LocalDate:
        """Parse a YYYY-MM-DD string."""
        match = _DATE_RE.match(value.strip())
        if not match:
            raise InvalidDateError(f"Expected YYYY-MM-DD, got {value!r}", value)
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)

    @classmethod
    def from_day_number(cls, day_number: int) -> LocalDate:
        """Build from days since 1970-01-01."""
        d = date.fromordinal(day_number + EPOCH_ORDINAL)
        return cls(d.year, d.month, d.day)

    @property
    def day_number(self) -> int:
        """Days since 1970-01-01 (negative before the epoch)."""
        return date(self.year, self.month, self.day).toordinal() - EPOCH_ORDINAL

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


# --- Wall-clock time ---


@dataclass(frozen=True, order=True)
class LocalTime:
    """Wall-clock time (minute resolution) with no date and no zone."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59):
            raise InvalidDateError(
                f"Time out of range: {self.hour:02d}:{self.minute:02d}",
                f"{self.hour}:{self.minute}",
            )

    @classmethod
    def parse(cls, value: str) -> LocalTime:
        """Parse HH:MM or HH:MM:SS (seconds are dropped)."""
        match = _TIME_RE.match(value.strip())
        if not match:
            raise InvalidDateError(f"Expected HH:MM, got {value!r}", value)
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def from_minutes(cls, minutes: int) -> LocalTime:
        return cls(minutes // 60, minutes % 60)

    @property
    def minutes(self) -> int:
        """Minutes since local midnight."""
        return self.hour * 60 + self.minute

    def isoformat(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def __str__(self) -> str:
        return self.isoformat()


MIDNIGHT = LocalTime(0, 0)


@dataclass(frozen=True, order=True)
class LocalDateTime:
    """Local date + wall-clock time as observed in some zone."""

    date: LocalDate
    time: LocalTime

    @property
    def absolute_minutes(self) -> int:
        """Minutes since 1970-01-01T00:00 on this wall clock."""
        return self.date.day_number * 1440 + self.time.minutes

    def isoformat(self) -> str:
        return f"{self.date.isoformat()}T{self.time.isoformat()}"

    def __str__(self) -> str:
        return self.isoformat()


# --- Instants ---


def ensure_utc(instant: datetime) -> datetime:
    """Normalize to an aware UTC datetime; naive input is taken as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 timestamp carrying zone information."""
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    return ensure_utc(parsed)


def format_instant(instant: datetime) -> str:
    """Format as ISO-8601 UTC with a trailing Z."""
    text = ensure_utc(instant).isoformat()
    return text.replace("+00:00", "Z")


# --- Cycle configuration ---


def is_real_month_day(month: int, day: int) -> bool:
    """
    True when (month, day) exists on the calendar.

    Builds the candidate date in a leap year and confirms the built month/day
    match the input, so (2, 29) is accepted and (2, 30) / (4, 31) are not.
    """
    try:
        candidate = date(REFERENCE_LEAP_YEAR, month, day)
    except ValueError:
        return False
    return candidate.month == month and candidate.day == day


class CycleConfig(BaseModel):
    """
    Recurring membership/billing year boundaries.

    Example: start 4/1, end 3/31 is an April-to-March year.
    """

    model_config = ConfigDict(frozen=True)

    start_month: int = Field(ge=1, le=12)
    start_day: int = Field(ge=1, le=31)
    end_month: int = Field(ge=1, le=12)
    end_day: int = Field(ge=1, le=31)
    description: str | None = None

    @model_validator(mode="after")
    def _check_real_dates(self) -> CycleConfig:
        if not is_real_month_day(self.start_month, self.start_day):
            raise ValueError("Invalid start date (day does not exist in the specified month)")
        if not is_real_month_day(self.end_month, self.end_day):
            raise ValueError("Invalid end date (day does not exist in the specified month)")
        return self

    @property
    def start_key(self) -> tuple[int, int]:
        return (self.start_month, self.start_day)

    @property
    def end_key(self) -> tuple[int, int]:
        return (self.end_month, self.end_day)


@dataclass(frozen=True)
class CycleWindow:
    """One concrete instance of a recurring cycle (both ends inclusive dates)."""

    start: LocalDate
    end: LocalDate

    def contains(self, value: LocalDate) -> bool:
        return self.start <= value <= self.end

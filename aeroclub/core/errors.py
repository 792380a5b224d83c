"""
Calendar-time errors.

Two kinds live here:
- Exceptions, raised at configuration-write boundaries and on malformed input.
- Result records (frozen dataclasses), returned by validators so callers can
  surface actionable messages without try/except.

Hot-path conversions never raise for an unknown zone or a non-converging
search; they degrade and log instead (see components.zones).
"""

from __future__ import annotations

from dataclasses import dataclass


class CalendarError(Exception):
    """Base exception for calendar-time errors."""

    pass


class InvalidDateError(CalendarError, ValueError):
    """A (year, month, day) or HH:MM value that does not exist."""

    def __init__(self, message: str, value: str | None = None) -> None:
        self.value = value
        super().__init__(message)


class UnknownTimeZoneError(CalendarError, KeyError):
    """Zone id not present in the timezone database."""

    def __init__(self, zone_id: str) -> None:
        self.zone_id = zone_id
        super().__init__(zone_id)

    def __str__(self) -> str:
        return f"Unknown time zone: {self.zone_id!r}"


class InvalidTimeZoneError(CalendarError, ValueError):
    """Tenant configuration names a zone the database does not know."""

    def __init__(self, zone_id: str, message: str | None = None) -> None:
        self.zone_id = zone_id
        super().__init__(message or f"Unknown time zone: {zone_id!r}")


class InvalidCycleConfigError(CalendarError, ValueError):
    """Membership/billing year configuration is out of range or not a real date."""

    def __init__(self, field: str, code: str, message: str) -> None:
        self.field = field
        self.code = code
        super().__init__(message)


class AmbiguousLocalTimeError(CalendarError, ValueError):
    """Wall-clock time occurs twice in the zone and the caller asked to reject it."""

    def __init__(self, local: str, zone_id: str) -> None:
        self.local = local
        self.zone_id = zone_id
        super().__init__(f"Local time {local} is ambiguous in {zone_id}")


# --- Result records ---


@dataclass(frozen=True)
class InvalidCycleConfig:
    """Validation failure for a cycle configuration."""

    field: str
    code: str
    message: str

    def to_exception(self) -> InvalidCycleConfigError:
        return InvalidCycleConfigError(self.field, self.code, self.message)


@dataclass(frozen=True)
class TimeZoneIssue:
    """Validation failure for a configured zone id."""

    zone_id: str
    code: str
    message: str

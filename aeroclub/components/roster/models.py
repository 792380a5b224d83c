"""
Roster availability component models.

Roster rules are stored as local wall-clock times and local calendar dates;
bookings are stored as UTC instants.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from aeroclub.core.entities import LocalDate


@dataclass(frozen=True)
class RosterRule:
    """Recurring weekly availability for one instructor."""

    instructor_id: str
    day_of_week: int  # Sunday=0 .. Saturday=6
    start_time: str  # HH:MM or HH:MM:SS, local
    end_time: str
    is_active: bool = True
    effective_from: LocalDate | None = None
    effective_until: LocalDate | None = None
    voided_at: datetime | None = None
    id: str | None = None


@dataclass(frozen=True)
class MinutesWindow:
    """Minutes since local midnight, start < end."""

    start_min: int
    end_min: int


@dataclass(frozen=True)
class RosterCheckInput:
    """Input for checking a booking interval against roster rules."""

    start: datetime
    end: datetime
    rules: list[RosterRule]
    zone_id: str


@dataclass(frozen=True)
class RosterCheckOutput:
    """Instructors rostered for the whole booking."""

    local_date: LocalDate
    start_min: int
    end_min: int
    rostered_instructor_ids: frozenset[str] = field(default_factory=frozenset)
    crosses_midnight: bool = False

    def is_rostered(self, instructor_id: str) -> bool:
        return instructor_id in self.rostered_instructor_ids

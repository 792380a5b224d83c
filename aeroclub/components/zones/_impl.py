"""
ZoneConverter - zone conversions bound to one timezone database.

For callers (booking validation, business hours, membership dates) that
inject the database once instead of passing it on every call. Holds no
conversion state; every call recomputes from the database.
"""

from __future__ import annotations

from datetime import datetime

from aeroclub.adapters.tzdb import ZoneInfoDatabase
from aeroclub.core.entities import LocalDate, LocalDateTime, LocalTime

from .component import convert_to_instant, to_instant, to_local, today_in_zone
from .models import AmbiguityPolicy, ToInstantOutput
from .ports import ClockPort, TimeZoneDatabasePort


class ZoneConverter:
    """Instant <-> wall-clock conversions against an injected database."""

    def __init__(
        self,
        db: TimeZoneDatabasePort | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        self._db = db or ZoneInfoDatabase()
        self._clock = clock

    @property
    def db(self) -> TimeZoneDatabasePort:
        return self._db

    def to_local(self, instant: datetime, zone_id: str) -> LocalDateTime:
        return to_local(instant, zone_id, db=self._db)

    def to_instant(
        self,
        local_date: LocalDate,
        local_time: LocalTime,
        zone_id: str,
        ambiguity: AmbiguityPolicy = "earlier",
    ) -> datetime:
        return to_instant(local_date, local_time, zone_id, db=self._db, ambiguity=ambiguity)

    def convert(
        self,
        local_date: LocalDate,
        local_time: LocalTime,
        zone_id: str,
        ambiguity: AmbiguityPolicy = "earlier",
    ) -> ToInstantOutput:
        """Like to_instant, with iteration count and resolution."""
        return convert_to_instant(
            local_date, local_time, zone_id, db=self._db, ambiguity=ambiguity
        )

    def today(self, zone_id: str) -> LocalDate:
        return today_in_zone(zone_id, clock=self._clock, db=self._db)

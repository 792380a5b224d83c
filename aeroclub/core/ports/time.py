"""
Timezone database and clock ports.

Protocol-based interfaces so the host's IANA database and the wall clock can
be swapped for fixed fakes in tests.

Key requirements:
- Instants cross these ports as aware UTC datetimes
- get_zone raises UnknownTimeZoneError for ids the database does not know
- Implementations hold no conversion caches (the database can change between
  deployments)
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Protocol


class TimeZoneDatabasePort(Protocol):
    """
    Read-only timezone database.

    Implementations:
    - ZoneInfoDatabase: host IANA database via zoneinfo
    - StaticZoneDatabase: fixed zone table for tests
    """

    def get_zone(self, zone_id: str) -> tzinfo:
        """
        Resolve a zone id.

        Args:
            zone_id: IANA zone identifier (e.g. "Pacific/Auckland")

        Returns:
            tzinfo usable with datetime.astimezone

        Raises:
            UnknownTimeZoneError: zone_id is not in the database
        """
        ...

    def is_known(self, zone_id: str) -> bool:
        """Check whether zone_id resolves."""
        ...


class ClockPort(Protocol):
    def now_utc(self) -> datetime:
        """Return current UTC time (timezone-aware)."""
        ...

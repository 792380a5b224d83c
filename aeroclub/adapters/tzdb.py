"""
Timezone database adapters (TimeZoneDatabasePort implementations).

ZoneInfoDatabase resolves IANA ids against the host database through zoneinfo;
the tzdata package supplies the data on hosts without a system database.
StaticZoneDatabase serves a fixed table and is meant for deterministic tests.

Key behaviors:
- Unknown ids raise UnknownTimeZoneError (never a zoneinfo-specific error)
- No conversion results are cached here
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from aeroclub.core.errors import UnknownTimeZoneError

logger = logging.getLogger(__name__)


class ZoneInfoDatabase:
    """
    Host IANA timezone database.

    Handles DST transitions through the zone rules shipped with the host (or
    the tzdata wheel).
    """

    def get_zone(self, zone_id: str) -> tzinfo:
        """Resolve zone_id, raising UnknownTimeZoneError when absent."""
        if not zone_id:
            raise UnknownTimeZoneError(zone_id)
        try:
            return ZoneInfo(zone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            # OSError covers ids naming a tzdata directory, e.g. "America"
            logger.debug("zoneinfo lookup failed for %r: %s", zone_id, e)
            raise UnknownTimeZoneError(zone_id) from e

    def is_known(self, zone_id: str) -> bool:
        try:
            self.get_zone(zone_id)
        except UnknownTimeZoneError:
            return False
        return True

    def zone_ids(self) -> set[str]:
        """All ids the host database offers."""
        return available_timezones()


@dataclass
class StaticZoneDatabase:
    """
    Fixed zone table.

    Useful for deterministic testing: map ids to datetime.timezone offsets or
    to hand-built tzinfo implementations.
    """

    zones: dict[str, tzinfo] = field(default_factory=lambda: {"UTC": UTC})

    def get_zone(self, zone_id: str) -> tzinfo:
        try:
            return self.zones[zone_id]
        except KeyError:
            raise UnknownTimeZoneError(zone_id) from None

    def is_known(self, zone_id: str) -> bool:
        return zone_id in self.zones

    def zone_ids(self) -> set[str]:
        return set(self.zones)


def create_zone_database() -> ZoneInfoDatabase:
    """Factory function for the host timezone database."""
    return ZoneInfoDatabase()

"""
Zones component - instant <-> wall-clock conversion (ZoneConverter).
"""

from ._impl import ZoneConverter
from .component import (
    MAX_CONVERSION_ITERATIONS,
    convert_to_instant,
    require_time_zone,
    run,
    to_instant,
    to_local,
    today_in_zone,
    validate_time_zone,
)
from .models import (
    AmbiguityPolicy,
    Resolution,
    ToInstantInput,
    ToInstantOutput,
    ToLocalInput,
    ToLocalOutput,
    TodayInput,
    TodayOutput,
)
from .ports import ClockPort, TimeZoneDatabasePort

__all__ = [
    # Entry points
    "run",
    "to_local",
    "to_instant",
    "convert_to_instant",
    "today_in_zone",
    "validate_time_zone",
    "require_time_zone",
    "MAX_CONVERSION_ITERATIONS",
    # Models
    "AmbiguityPolicy",
    "Resolution",
    "ToInstantInput",
    "ToInstantOutput",
    "ToLocalInput",
    "ToLocalOutput",
    "TodayInput",
    "TodayOutput",
    # Ports
    "ClockPort",
    "TimeZoneDatabasePort",
    # Service
    "ZoneConverter",
]

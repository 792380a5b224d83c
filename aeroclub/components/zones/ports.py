"""
Zone conversion component port definitions.
"""

from aeroclub.core.ports.time import ClockPort, TimeZoneDatabasePort

__all__ = ["ClockPort", "TimeZoneDatabasePort"]

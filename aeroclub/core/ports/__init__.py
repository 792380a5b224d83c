# aeroclub - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from aeroclub.core.ports.time import ClockPort, TimeZoneDatabasePort

__all__ = [
    "ClockPort",
    "TimeZoneDatabasePort",
]

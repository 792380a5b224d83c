"""
Billing cycle component models.

Dates here are calendar dates already localized to the tenant zone; nothing
in this component takes a zone id.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from aeroclub.core.entities import CycleConfig, CycleWindow, LocalDate
from aeroclub.core.errors import InvalidCycleConfig

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# April 1 -> March 31, the usual aero-club membership year
DEFAULT_CYCLE_CONFIG = CycleConfig(
    start_month=4,
    start_day=1,
    end_month=3,
    end_day=31,
    description="April to March membership year",
)


@dataclass(frozen=True)
class CycleContainingInput:
    """Input for finding the cycle that contains a date."""

    config: CycleConfig
    reference_date: LocalDate


@dataclass(frozen=True)
class DefaultExpiryInput:
    """Input for a new subscription's expiry."""

    config: CycleConfig
    start_date: LocalDate


@dataclass(frozen=True)
class RenewalExpiryInput:
    """Input for a renewal's expiry."""

    config: CycleConfig
    current_expiry: LocalDate


@dataclass(frozen=True)
class ExpiryOutput:
    expiry: LocalDate


@dataclass(frozen=True)
class ValidateConfigInput:
    """Input for validating a (possibly untrusted) cycle configuration."""

    config: CycleConfig | Mapping[str, Any]


@dataclass(frozen=True)
class ValidateConfigOutput:
    error: InvalidCycleConfig | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = [
    "DEFAULT_CYCLE_CONFIG",
    "MONTH_NAMES",
    "CycleConfig",
    "CycleContainingInput",
    "CycleWindow",
    "DefaultExpiryInput",
    "ExpiryOutput",
    "RenewalExpiryInput",
    "ValidateConfigInput",
    "ValidateConfigOutput",
]

"""
Membership component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from aeroclub.core.entities import CycleConfig, LocalDate

MembershipStatus = Literal["active", "grace", "expired", "unpaid", "none"]

DEFAULT_GRACE_PERIOD_DAYS = 30


@dataclass(frozen=True)
class MembershipDates:
    """Dates to persist for a new or renewed membership."""

    start: datetime  # UTC instant
    expiry: LocalDate  # tenant-local calendar date


@dataclass(frozen=True)
class CreateMembershipInput:
    config: CycleConfig
    zone_id: str
    start: datetime | None = None
    custom_expiry: LocalDate | None = None


@dataclass(frozen=True)
class RenewMembershipInput:
    config: CycleConfig
    current_expiry: LocalDate
    start: datetime | None = None
    custom_expiry: LocalDate | None = None


@dataclass(frozen=True)
class StatusInput:
    expiry: LocalDate | None
    today: LocalDate
    fee_paid: bool = True
    grace_period_days: int = DEFAULT_GRACE_PERIOD_DAYS


@dataclass(frozen=True)
class StatusOutput:
    status: MembershipStatus
    days_until_expiry: int | None = None
    grace_days_remaining: int | None = None

"""
Membership component.

Expiry dates for new and renewed memberships, and membership status on the
tenant's local calendar.

Key behaviors:
- The start instant is localized to the tenant zone before the cycle lookup
- Renewal expiry follows the current expiry, never "today"
- Expiry dates are inclusive local dates; grace runs for whole local days
"""

from __future__ import annotations

from datetime import datetime

from aeroclub.adapters.clock import SystemClock
from aeroclub.components.billing_cycle import compute_default_expiry, compute_renewal_expiry
from aeroclub.components.day_window import add_days, days_between
from aeroclub.components.zones import ClockPort, TimeZoneDatabasePort, to_local
from aeroclub.core.entities import CycleConfig, LocalDate

from .models import (
    DEFAULT_GRACE_PERIOD_DAYS,
    CreateMembershipInput,
    MembershipDates,
    MembershipStatus,
    RenewMembershipInput,
    StatusInput,
    StatusOutput,
)

# --- Expiry dates ---


def create_membership_dates(
    config: CycleConfig,
    zone_id: str,
    *,
    start: datetime | None = None,
    custom_expiry: LocalDate | None = None,
    clock: ClockPort | None = None,
    db: TimeZoneDatabasePort | None = None,
) -> MembershipDates:
    """
    Dates for a new membership.

    Args:
        config: Tenant membership year
        zone_id: Tenant IANA zone id
        start: Start instant (defaults to now)
        custom_expiry: Administrator override for the expiry date
        clock: Clock used when start is omitted
        db: Timezone database (defaults to the host database)
    """
    start = start or (clock or SystemClock()).now_utc()
    if custom_expiry is not None:
        return MembershipDates(start=start, expiry=custom_expiry)
    start_date = to_local(start, zone_id, db=db).date
    return MembershipDates(start=start, expiry=compute_default_expiry(config, start_date))


def renew_membership_dates(
    config: CycleConfig,
    current_expiry: LocalDate,
    *,
    start: datetime | None = None,
    custom_expiry: LocalDate | None = None,
    clock: ClockPort | None = None,
) -> MembershipDates:
    """Dates for a renewal of a membership expiring on current_expiry."""
    start = start or (clock or SystemClock()).now_utc()
    expiry = custom_expiry or compute_renewal_expiry(config, current_expiry)
    return MembershipDates(start=start, expiry=expiry)


# --- Status ---


def membership_status(
    expiry: LocalDate | None,
    today: LocalDate,
    *,
    fee_paid: bool = True,
    grace_period_days: int = DEFAULT_GRACE_PERIOD_DAYS,
) -> MembershipStatus:
    if expiry is None:
        return "none"
    if not fee_paid:
        return "unpaid"
    if today <= expiry:
        return "active"
    if today <= add_days(expiry, grace_period_days):
        return "grace"
    return "expired"


def days_until_expiry(expiry: LocalDate, today: LocalDate) -> int | None:
    """Days left for an active membership, None otherwise."""
    if today > expiry:
        return None
    return days_between(today, expiry)


def grace_days_remaining(
    expiry: LocalDate,
    today: LocalDate,
    grace_period_days: int = DEFAULT_GRACE_PERIOD_DAYS,
) -> int | None:
    """Days of grace left, None outside the grace period."""
    grace_end = add_days(expiry, grace_period_days)
    if today <= expiry or today > grace_end:
        return None
    return days_between(today, grace_end)


def can_renew(status: MembershipStatus) -> bool:
    return status in ("active", "grace", "unpaid")


def is_expiring_soon(expiry: LocalDate, today: LocalDate, warning_days: int = 30) -> bool:
    remaining = days_until_expiry(expiry, today)
    return remaining is not None and remaining <= warning_days


def evaluate_status(inp: StatusInput) -> StatusOutput:
    status = membership_status(
        inp.expiry,
        inp.today,
        fee_paid=inp.fee_paid,
        grace_period_days=inp.grace_period_days,
    )
    if status == "active" and inp.expiry is not None:
        return StatusOutput(status, days_until_expiry=days_until_expiry(inp.expiry, inp.today))
    if status == "grace" and inp.expiry is not None:
        remaining = grace_days_remaining(inp.expiry, inp.today, inp.grace_period_days)
        return StatusOutput(status, grace_days_remaining=remaining)
    return StatusOutput(status)


# --- Component Entry Point ---


def run(
    inp: CreateMembershipInput | RenewMembershipInput | StatusInput,
    *,
    clock: ClockPort | None = None,
    db: TimeZoneDatabasePort | None = None,
) -> MembershipDates | StatusOutput:
    """
    Main entry point for the membership component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, CreateMembershipInput):
        return create_membership_dates(
            inp.config,
            inp.zone_id,
            start=inp.start,
            custom_expiry=inp.custom_expiry,
            clock=clock,
            db=db,
        )
    elif isinstance(inp, RenewMembershipInput):
        return renew_membership_dates(
            inp.config,
            inp.current_expiry,
            start=inp.start,
            custom_expiry=inp.custom_expiry,
            clock=clock,
        )
    elif isinstance(inp, StatusInput):
        return evaluate_status(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

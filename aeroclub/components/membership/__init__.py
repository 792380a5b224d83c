"""
Membership component - membership expiry dates and status.
"""

from .component import (
    can_renew,
    create_membership_dates,
    days_until_expiry,
    evaluate_status,
    grace_days_remaining,
    is_expiring_soon,
    membership_status,
    renew_membership_dates,
    run,
)
from .models import (
    DEFAULT_GRACE_PERIOD_DAYS,
    CreateMembershipInput,
    MembershipDates,
    MembershipStatus,
    RenewMembershipInput,
    StatusInput,
    StatusOutput,
)

__all__ = [
    "can_renew",
    "create_membership_dates",
    "days_until_expiry",
    "evaluate_status",
    "grace_days_remaining",
    "is_expiring_soon",
    "membership_status",
    "renew_membership_dates",
    "run",
    "DEFAULT_GRACE_PERIOD_DAYS",
    "CreateMembershipInput",
    "MembershipDates",
    "MembershipStatus",
    "RenewMembershipInput",
    "StatusInput",
    "StatusOutput",
]

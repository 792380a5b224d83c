"""
Billing cycle component (BillingCycleCalculator).

Recurring membership/billing year arithmetic over local calendar dates.

Key behaviors:
- The cycle containing a date compares (month, day) against the configured
  start, so years that straddle January 1 (April 1 -> March 31) work
- A new subscription expires at the end of the cycle containing its start
- A renewal always advances to the next cycle end after the current expiry,
  wherever "today" falls (early, on-time and late renewals chain)
- Configuration is validated by building the candidate date and checking the
  built month/day match the input
- February 29 boundaries clamp to February 28 in common years
"""

from __future__ import annotations

import calendar
from collections.abc import Mapping
from typing import Any

from aeroclub.core.entities import (
    CycleConfig,
    CycleWindow,
    LocalDate,
    is_real_month_day,
)
from aeroclub.core.errors import InvalidCycleConfig, InvalidCycleConfigError

from .models import (
    DEFAULT_CYCLE_CONFIG,
    MONTH_NAMES,
    CycleContainingInput,
    DefaultExpiryInput,
    ExpiryOutput,
    RenewalExpiryInput,
    ValidateConfigInput,
    ValidateConfigOutput,
)

# --- Helpers ---


def _date_in_year(year: int, month: int, day: int) -> LocalDate:
    """Recurring (month, day) in a given year; Feb 29 clamps in common years."""
    return LocalDate(year, month, min(day, calendar.monthrange(year, month)[1]))


def _end_year_offset(config: CycleConfig) -> int:
    """Years between a cycle's start and its end (0 for a calendar-year cycle)."""
    return 1 if config.end_key <= config.start_key else 0


def _ordinal_suffix(day: int) -> str:
    if 11 <= day <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


# --- Pure Functions ---


def compute_cycle_containing(config: CycleConfig, reference_date: LocalDate) -> CycleWindow:
    """
    Find the cycle instance that contains reference_date.

    Args:
        config: Cycle configuration
        reference_date: Local calendar date

    Returns:
        CycleWindow with inclusive start and end dates
    """
    this_year_start = _date_in_year(reference_date.year, config.start_month, config.start_day)
    if reference_date >= this_year_start:
        start_year = reference_date.year
    else:
        start_year = reference_date.year - 1

    start = _date_in_year(start_year, config.start_month, config.start_day)
    end = _date_in_year(start_year + _end_year_offset(config), config.end_month, config.end_day)
    if end < reference_date:
        # Short cycle (e.g. April 1 -> June 30) whose end has already passed
        end = _date_in_year(end.year + 1, config.end_month, config.end_day)
    return CycleWindow(start=start, end=end)


def compute_default_expiry(config: CycleConfig, start_date: LocalDate) -> LocalDate:
    """A subscription started on start_date expires at the end of that date's cycle."""
    return compute_cycle_containing(config, start_date).end


def compute_renewal_expiry(config: CycleConfig, current_expiry: LocalDate) -> LocalDate:
    """
    Expiry for a renewal of a subscription expiring on current_expiry.

    Always the configured end date in the year after current_expiry, so the
    result is strictly later than current_expiry and consecutive renewals
    chain year N -> year N+1 regardless of when they are processed.
    """
    return _date_in_year(current_expiry.year + 1, config.end_month, config.end_day)


def next_cycle_start(config: CycleConfig, reference_date: LocalDate) -> LocalDate:
    """First day of the cycle after the one containing reference_date."""
    current = compute_cycle_containing(config, reference_date)
    return _date_in_year(current.start.year + 1, config.start_month, config.start_day)


def is_within_cycle(
    config: CycleConfig,
    value: LocalDate,
    reference_date: LocalDate,
) -> bool:
    """True when value falls inside the cycle containing reference_date."""
    return compute_cycle_containing(config, reference_date).contains(value)


def cycle_label(config: CycleConfig, reference_date: LocalDate) -> str:
    """Human-readable label, e.g. "2024-2025 Membership Year"."""
    window = compute_cycle_containing(config, reference_date)
    if window.start.year == window.end.year:
        return f"{window.start.year} Membership Year"
    return f"{window.start.year}-{window.end.year} Membership Year"


def describe_config(config: CycleConfig) -> str:
    """Describe the recurring boundaries, e.g. "April 1st to March 31st"."""
    start = f"{MONTH_NAMES[config.start_month - 1]} {config.start_day}"
    end = f"{MONTH_NAMES[config.end_month - 1]} {config.end_day}"
    return (
        f"{start}{_ordinal_suffix(config.start_day)} to "
        f"{end}{_ordinal_suffix(config.end_day)}"
    )


# --- Validation ---


def _get(config: CycleConfig | Mapping[str, Any], name: str) -> Any:
    if isinstance(config, Mapping):
        return config.get(name)
    return getattr(config, name, None)


def _check_range(
    config: CycleConfig | Mapping[str, Any],
    name: str,
    label: str,
    upper: int,
) -> InvalidCycleConfig | None:
    value = _get(config, name)
    if isinstance(value, bool) or not isinstance(value, int):
        return InvalidCycleConfig(
            field=name,
            code="invalid_type",
            message=f"{label} must be a whole number",
        )
    if value < 1 or value > upper:
        return InvalidCycleConfig(
            field=name,
            code="out_of_range",
            message=f"{label} must be between 1 and {upper}",
        )
    return None


def validate_config(config: CycleConfig | Mapping[str, Any]) -> InvalidCycleConfig | None:
    """
    Validate a cycle configuration.

    Accepts a CycleConfig or a raw settings mapping (as submitted by an
    administrator).

    Returns:
        InvalidCycleConfig describing the first problem, or None when valid
    """
    checks = (
        ("start_month", "Start month", 12),
        ("end_month", "End month", 12),
        ("start_day", "Start day", 31),
        ("end_day", "End day", 31),
    )
    for name, label, upper in checks:
        error = _check_range(config, name, label, upper)
        if error is not None:
            return error

    if not is_real_month_day(_get(config, "start_month"), _get(config, "start_day")):
        return InvalidCycleConfig(
            field="start_day",
            code="invalid_date",
            message="Invalid start date (day does not exist in the specified month)",
        )
    if not is_real_month_day(_get(config, "end_month"), _get(config, "end_day")):
        return InvalidCycleConfig(
            field="end_day",
            code="invalid_date",
            message="Invalid end date (day does not exist in the specified month)",
        )
    return None


def require_valid_config(config: CycleConfig | Mapping[str, Any]) -> CycleConfig:
    """
    Validate and return a CycleConfig.

    Raises:
        InvalidCycleConfigError: configuration is out of range or not a real date
    """
    error = validate_config(config)
    if error is not None:
        raise error.to_exception()
    if isinstance(config, CycleConfig):
        return config
    return CycleConfig.model_validate(dict(config))


def load_config_from_rules(rules: Mapping[str, Any]) -> CycleConfig:
    """
    Load CycleConfig from a parsed rules mapping.

    Falls back to DEFAULT_CYCLE_CONFIG when no membership_year is configured.
    """
    raw = rules.get("membership_year")
    if not raw:
        return DEFAULT_CYCLE_CONFIG
    return require_valid_config(raw)


# --- Component Entry Point ---


def run(
    inp: CycleContainingInput | DefaultExpiryInput | RenewalExpiryInput | ValidateConfigInput,
) -> CycleWindow | ExpiryOutput | ValidateConfigOutput:
    """
    Main entry point for the billing cycle component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, CycleContainingInput):
        return compute_cycle_containing(inp.config, inp.reference_date)
    elif isinstance(inp, DefaultExpiryInput):
        return ExpiryOutput(compute_default_expiry(inp.config, inp.start_date))
    elif isinstance(inp, RenewalExpiryInput):
        return ExpiryOutput(compute_renewal_expiry(inp.config, inp.current_expiry))
    elif isinstance(inp, ValidateConfigInput):
        return ValidateConfigOutput(validate_config(inp.config))
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")


__all__ = [
    "InvalidCycleConfigError",
    "compute_cycle_containing",
    "compute_default_expiry",
    "compute_renewal_expiry",
    "cycle_label",
    "describe_config",
    "is_within_cycle",
    "load_config_from_rules",
    "next_cycle_start",
    "require_valid_config",
    "run",
    "validate_config",
]

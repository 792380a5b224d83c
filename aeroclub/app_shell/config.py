"""
Startup and settings-write validation of the calendar rules.

Zone ids and membership-year boundaries are checked here, before they are
stored or used, so the conversion hot path never has to reject them.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from aeroclub.components.billing_cycle import validate_config
from aeroclub.components.zones import TimeZoneDatabasePort, validate_time_zone
from aeroclub.rules.loader import load_rules
from aeroclub.rules.models import CalendarRules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigIssue:
    """One problem found in the calendar rules."""

    field: str
    code: str
    message: str


def validate_calendar_rules(
    rules: CalendarRules,
    db: TimeZoneDatabasePort | None = None,
) -> list[ConfigIssue]:
    """
    Validate calendar rules before startup or before a settings write.

    Returns:
        List of issues (empty if valid)
    """
    issues: list[ConfigIssue] = []

    zone_issue = validate_time_zone(rules.tenant.timezone, db=db)
    if zone_issue is not None:
        issues.append(ConfigIssue("tenant.timezone", zone_issue.code, zone_issue.message))

    cycle_error = validate_config(rules.membership_year)
    if cycle_error is not None:
        issues.append(
            ConfigIssue(
                f"membership_year.{cycle_error.field}",
                cycle_error.code,
                cycle_error.message,
            )
        )

    return issues


def load_and_validate(path: Path, db: TimeZoneDatabasePort | None = None) -> CalendarRules:
    """
    Load rules and fail fast on any configuration issue.

    Raises:
        FileNotFoundError: rules file missing
        ValueError: rules file unparseable or invalid
    """
    rules = load_rules(path)
    issues = validate_calendar_rules(rules, db=db)
    if issues:
        for issue in issues:
            logger.error("Invalid calendar rules: %s: %s", issue.field, issue.message)
        summary = "; ".join(f"{i.field}: {i.message}" for i in issues)
        raise ValueError(f"Calendar rules are invalid: {summary}")

    logger.info("Calendar rules validated (zone %s)", rules.tenant.timezone)
    return rules


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging; unknown level names fall back to INFO."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

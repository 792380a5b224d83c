import argparse
import logging
import sys
from pathlib import Path

from aeroclub.app_shell.config import configure_logging, load_and_validate
from aeroclub.components.billing_cycle import (
    compute_cycle_containing,
    compute_renewal_expiry,
    cycle_label,
    describe_config,
)
from aeroclub.components.business_hours import check_open
from aeroclub.components.day_window import WEEKDAY_NAMES, day_of_week, day_range
from aeroclub.components.membership import StatusInput, evaluate_status, is_expiring_soon
from aeroclub.components.zones import convert_to_instant, to_local, today_in_zone
from aeroclub.core.entities import LocalDate, LocalTime, format_instant, parse_instant
from aeroclub.rules.loader import load_rules
from aeroclub.rules.models import CalendarRules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(args: argparse.Namespace) -> CalendarRules:
    path = Path(args.rules)
    if not path.exists():
        logger.debug(f"Rules file {path} not found, using defaults.")
        return CalendarRules()
    return load_rules(path)


def get_zone(args: argparse.Namespace) -> str:
    return args.zone or get_rules(args).tenant.timezone


def handle_to_local(args: argparse.Namespace) -> None:
    zone_id = get_zone(args)
    local = to_local(parse_instant(args.instant), zone_id)
    print(local.isoformat())


def handle_to_utc(args: argparse.Namespace) -> None:
    zone_id = get_zone(args)
    result = convert_to_instant(
        LocalDate.parse(args.date),
        LocalTime.parse(args.time),
        zone_id,
        ambiguity=args.ambiguity,
    )
    print(format_instant(result.instant))
    if result.resolution != "exact":
        logger.info(f"Resolution: {result.resolution} after {result.iterations} iterations")


def handle_day_range(args: argparse.Namespace) -> None:
    window = day_range(LocalDate.parse(args.date), get_zone(args))
    start, end = window.as_iso()
    print(f"{start} {end} ({window.hours:g}h)")


def handle_weekday(args: argparse.Namespace) -> None:
    dow = day_of_week(LocalDate.parse(args.date))
    print(f"{dow} {WEEKDAY_NAMES[dow]}")


def handle_cycle(args: argparse.Namespace) -> None:
    config = get_rules(args).membership_year
    reference = LocalDate.parse(args.date)
    window = compute_cycle_containing(config, reference)
    print(f"{window.start} {window.end}")
    print(f"{cycle_label(config, reference)} ({describe_config(config)})")


def handle_renew(args: argparse.Namespace) -> None:
    config = get_rules(args).membership_year
    print(compute_renewal_expiry(config, LocalDate.parse(args.expiry)))


def handle_status(args: argparse.Namespace) -> None:
    rules = get_rules(args)
    expiry = LocalDate.parse(args.expiry)
    if args.today:
        today = LocalDate.parse(args.today)
    else:
        today = today_in_zone(args.zone or rules.tenant.timezone)

    result = evaluate_status(
        StatusInput(
            expiry=expiry,
            today=today,
            fee_paid=not args.unpaid,
            grace_period_days=rules.membership.grace_period_days,
        )
    )
    line = result.status
    if result.days_until_expiry is not None:
        line += f" ({result.days_until_expiry} days left)"
        if is_expiring_soon(expiry, today, rules.membership.expiry_warning_days):
            line += ", expiring soon"
    elif result.grace_days_remaining is not None:
        line += f" ({result.grace_days_remaining} grace days left)"
    print(line)


def handle_open(args: argparse.Namespace) -> None:
    rules = get_rules(args)
    result = check_open(
        parse_instant(args.instant),
        rules.business_hours,
        args.zone or rules.tenant.timezone,
    )
    print(f"{'open' if result.is_open else 'closed'} ({result.reason})")


def handle_validate_rules(args: argparse.Namespace) -> None:
    rules = load_and_validate(Path(args.rules))
    print(f"Rules valid: zone {rules.tenant.timezone}, {describe_config(rules.membership_year)}")


HANDLERS = {
    "to-local": handle_to_local,
    "to-utc": handle_to_utc,
    "day-range": handle_day_range,
    "weekday": handle_weekday,
    "cycle": handle_cycle,
    "renew": handle_renew,
    "status": handle_status,
    "open": handle_open,
    "validate-rules": handle_validate_rules,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Aero club calendar-time CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    parser.add_argument("--log-level", default=None, help="Logging level (default WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # to-local
    to_local_parser = subparsers.add_parser("to-local", help="Show an instant's local time")
    to_local_parser.add_argument("instant", help="ISO-8601 instant, e.g. 2026-01-06T20:00:00Z")
    to_local_parser.add_argument("--zone", help="IANA zone id (default: tenant zone)")

    # to-utc
    to_utc_parser = subparsers.add_parser("to-utc", help="Convert a local date/time to UTC")
    to_utc_parser.add_argument("date", help="Local date YYYY-MM-DD")
    to_utc_parser.add_argument("time", help="Local time HH:MM")
    to_utc_parser.add_argument("--zone", help="IANA zone id (default: tenant zone)")
    to_utc_parser.add_argument(
        "--ambiguity",
        choices=["earlier", "later", "reject"],
        default="earlier",
        help="Which occurrence to use when the local time happens twice",
    )

    # day-range
    range_parser = subparsers.add_parser("day-range", help="UTC range of a local day")
    range_parser.add_argument("date", help="Local date YYYY-MM-DD")
    range_parser.add_argument("--zone", help="IANA zone id (default: tenant zone)")

    # weekday
    weekday_parser = subparsers.add_parser("weekday", help="Day of week (Sunday=0)")
    weekday_parser.add_argument("date", help="Date YYYY-MM-DD")

    # cycle
    cycle_parser = subparsers.add_parser("cycle", help="Membership year containing a date")
    cycle_parser.add_argument("date", help="Local date YYYY-MM-DD")

    # renew
    renew_parser = subparsers.add_parser("renew", help="Expiry after renewing")
    renew_parser.add_argument("expiry", help="Current expiry YYYY-MM-DD")

    # status
    status_parser = subparsers.add_parser("status", help="Membership status for an expiry date")
    status_parser.add_argument("expiry", help="Expiry date YYYY-MM-DD")
    status_parser.add_argument("--today", help="Local date to evaluate on (default: today)")
    status_parser.add_argument("--unpaid", action="store_true", help="Membership fee not paid")
    status_parser.add_argument("--zone", help="IANA zone id (default: tenant zone)")

    # open
    open_parser = subparsers.add_parser("open", help="Whether the club is open at an instant")
    open_parser.add_argument("instant", help="ISO-8601 instant")
    open_parser.add_argument("--zone", help="IANA zone id (default: tenant zone)")

    # validate-rules
    subparsers.add_parser("validate-rules", help="Validate the rules file")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level or "WARNING")

    try:
        HANDLERS[args.command](args)
    except (ValueError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

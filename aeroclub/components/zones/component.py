"""
Zone conversion component (ZoneConverter).

Converts between UTC instants and a zone's Gregorian wall clock.

Key behaviors:
- to_local: DST-aware localization through the injected timezone database
- to_instant: fixed-point search (local -> UTC has no closed form under DST),
  capped at MAX_CONVERSION_ITERATIONS
- Skipped local times ("spring forward" gap) snap forward past the gap
- Ambiguous local times ("fall back" overlap) resolve by policy, earlier
  occurrence by default
- Unknown zones degrade to UTC with a warning instead of failing the caller
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta, tzinfo

from aeroclub.adapters.clock import SystemClock
from aeroclub.adapters.tzdb import ZoneInfoDatabase
from aeroclub.core.entities import (
    LocalDate,
    LocalDateTime,
    LocalTime,
    ensure_utc,
)
from aeroclub.core.errors import (
    AmbiguousLocalTimeError,
    InvalidDateError,
    InvalidTimeZoneError,
    TimeZoneIssue,
    UnknownTimeZoneError,
)

from .models import (
    AmbiguityPolicy,
    ToInstantInput,
    ToInstantOutput,
    ToLocalInput,
    ToLocalOutput,
    TodayInput,
    TodayOutput,
)
from .ports import ClockPort, TimeZoneDatabasePort

logger = logging.getLogger(__name__)

MAX_CONVERSION_ITERATIONS = 6

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MINUTE = timedelta(minutes=1)
_DAY = timedelta(days=1)


# --- Helpers ---


def _resolve_zone(zone_id: str, db: TimeZoneDatabasePort) -> tuple[tzinfo, bool]:
    """Resolve zone_id; unknown ids fall back to UTC (second item True)."""
    try:
        return db.get_zone(zone_id), False
    except UnknownTimeZoneError:
        logger.warning("Unknown time zone %r, interpreting as UTC", zone_id)
        return UTC, True


def _wall_clock(instant: datetime, tz: tzinfo) -> LocalDateTime:
    try:
        local = ensure_utc(instant).astimezone(tz)
    except OverflowError as e:
        raise InvalidDateError(
            f"{instant.isoformat()} is outside the supported date range", instant.isoformat()
        ) from e
    return LocalDateTime(
        LocalDate(local.year, local.month, local.day),
        LocalTime(local.hour, local.minute),
    )


def _utc_minutes(instant: datetime) -> int:
    return (ensure_utc(instant) - _EPOCH) // _MINUTE


def _instant_from_minutes(minutes: int) -> datetime:
    return _EPOCH + timedelta(minutes=minutes)


def _offset_minutes(instant: datetime, tz: tzinfo) -> int:
    return _wall_clock(instant, tz).absolute_minutes - _utc_minutes(instant)


def _nearby_offsets(anchor: datetime, tz: tzinfo) -> set[int]:
    """UTC offsets in effect within a day either side of anchor."""
    return {_offset_minutes(anchor + step, tz) for step in (-_DAY, timedelta(0), _DAY)}


def _occurrences(target: int, offsets: set[int], tz: tzinfo) -> list[datetime]:
    """Instants whose wall clock reads exactly target, earliest first."""
    candidates = sorted({_instant_from_minutes(target - offset) for offset in offsets})
    return [c for c in candidates if _wall_clock(c, tz).absolute_minutes == target]


# --- Pure Functions ---


def to_local(
    instant: datetime,
    zone_id: str,
    *,
    db: TimeZoneDatabasePort | None = None,
) -> LocalDateTime:
    """
    Localize an instant into zone_id's wall clock.

    Args:
        instant: Absolute time (naive treated as UTC)
        zone_id: IANA zone id
        db: Timezone database (defaults to the host database)

    Returns:
        LocalDateTime with minute resolution
    """
    tz, _ = _resolve_zone(zone_id, db or ZoneInfoDatabase())
    return _wall_clock(instant, tz)


def convert_to_instant(
    local_date: LocalDate,
    local_time: LocalTime,
    zone_id: str,
    *,
    db: TimeZoneDatabasePort | None = None,
    ambiguity: AmbiguityPolicy = "earlier",
) -> ToInstantOutput:
    """
    Find the instant whose wall clock in zone_id reads local_date local_time.

    Starts from the wall clock read as if it were UTC, observes what that
    guess looks like in the zone, and shifts the guess by the signed minute
    difference until the difference is zero.

    Args:
        local_date: Wall-clock date
        local_time: Wall-clock time
        zone_id: IANA zone id
        db: Timezone database (defaults to the host database)
        ambiguity: Policy for a wall-clock time that occurs twice

    Returns:
        ToInstantOutput with the instant and how it was settled

    Raises:
        AmbiguousLocalTimeError: ambiguity="reject" and the time occurs twice
        InvalidDateError: the result would fall outside the datetime range
    """
    tz, fell_back = _resolve_zone(zone_id, db or ZoneInfoDatabase())
    desired = LocalDateTime(local_date, local_time)
    try:
        return _search(desired, tz, zone_id, ambiguity, fell_back)
    except OverflowError as e:
        raise InvalidDateError(
            f"Local time {desired} in {zone_id} is outside the supported date range",
            desired.isoformat(),
        ) from e


def _search(
    desired: LocalDateTime,
    tz: tzinfo,
    zone_id: str,
    ambiguity: AmbiguityPolicy,
    fell_back: bool,
) -> ToInstantOutput:
    target = desired.absolute_minutes

    naive_guess = _instant_from_minutes(target)
    guess = naive_guess
    seen: set[datetime] = set()
    converged = False
    oscillating = False
    iterations = 0

    for iterations in range(1, MAX_CONVERSION_ITERATIONS + 1):
        diff = target - _wall_clock(guess, tz).absolute_minutes
        logger.debug("to_instant %s %s: guess=%s diff=%d", desired, zone_id, guess, diff)
        if diff == 0:
            converged = True
            break
        seen.add(guess)
        guess = guess + timedelta(minutes=diff)
        if guess in seen:
            # Bouncing between two guesses: the wall-clock time falls in a gap
            oscillating = True
            break

    offsets = _nearby_offsets(guess, tz)
    occurrences = _occurrences(target, offsets, tz) if converged or not oscillating else []

    if converged and len(occurrences) <= 1:
        return ToInstantOutput(guess, iterations, "exact", fell_back)

    if len(occurrences) > 1:
        if ambiguity == "reject":
            raise AmbiguousLocalTimeError(desired.isoformat(), zone_id)
        chosen = occurrences[0] if ambiguity == "earlier" else occurrences[-1]
        return ToInstantOutput(chosen, iterations, "ambiguous", fell_back)

    if len(occurrences) == 1:
        return ToInstantOutput(occurrences[0], iterations, "exact", fell_back)

    if oscillating:
        # Read the skipped time with the offset in force before the gap
        snapped = naive_guess - timedelta(minutes=min(offsets))
        logger.debug("Local time %s skipped in %s, snapped to %s", desired, zone_id, snapped)
        return ToInstantOutput(snapped, iterations, "skipped", fell_back)

    logger.warning(
        "conversion_non_convergence: %s in %s after %d iterations, using %s",
        desired,
        zone_id,
        iterations,
        guess.isoformat(),
    )
    return ToInstantOutput(guess, iterations, "non_convergent", fell_back)


def to_instant(
    local_date: LocalDate,
    local_time: LocalTime,
    zone_id: str,
    *,
    db: TimeZoneDatabasePort | None = None,
    ambiguity: AmbiguityPolicy = "earlier",
) -> datetime:
    """Convert a wall-clock date/time in zone_id to a UTC instant."""
    return convert_to_instant(
        local_date, local_time, zone_id, db=db, ambiguity=ambiguity
    ).instant


def today_in_zone(
    zone_id: str,
    *,
    clock: ClockPort | None = None,
    db: TimeZoneDatabasePort | None = None,
) -> LocalDate:
    """Today's calendar date as observed in zone_id."""
    clock = clock or SystemClock()
    return to_local(clock.now_utc(), zone_id, db=db).date


# --- Configuration-write checks ---


def validate_time_zone(
    zone_id: str,
    *,
    db: TimeZoneDatabasePort | None = None,
) -> TimeZoneIssue | None:
    """
    Check a zone id before it is stored in tenant configuration.

    Returns:
        TimeZoneIssue if the id is unusable, otherwise None
    """
    if not zone_id or not zone_id.strip():
        return TimeZoneIssue(zone_id, "required", "Time zone is required")
    db = db or ZoneInfoDatabase()
    if not db.is_known(zone_id):
        return TimeZoneIssue(
            zone_id,
            "unknown_zone",
            f"Unknown time zone '{zone_id}': use an IANA id such as 'Pacific/Auckland'",
        )
    return None


def require_time_zone(zone_id: str, *, db: TimeZoneDatabasePort | None = None) -> str:
    """Return zone_id unchanged or raise InvalidTimeZoneError."""
    issue = validate_time_zone(zone_id, db=db)
    if issue is not None:
        raise InvalidTimeZoneError(zone_id, issue.message)
    return zone_id


# --- Component Entry Point ---


def run(
    inp: ToLocalInput | ToInstantInput | TodayInput,
    *,
    db: TimeZoneDatabasePort | None = None,
    clock: ClockPort | None = None,
) -> ToLocalOutput | ToInstantOutput | TodayOutput:
    """
    Main entry point for the zones component.

    Dispatches to the appropriate handler based on input type.
    """
    db = db or ZoneInfoDatabase()
    if isinstance(inp, ToLocalInput):
        tz, fell_back = _resolve_zone(inp.zone_id, db)
        return ToLocalOutput(_wall_clock(inp.instant, tz), inp.zone_id, fell_back)
    elif isinstance(inp, ToInstantInput):
        return convert_to_instant(
            inp.local_date,
            inp.local_time,
            inp.zone_id,
            db=db,
            ambiguity=inp.ambiguity,
        )
    elif isinstance(inp, TodayInput):
        return TodayOutput(today_in_zone(inp.zone_id, clock=clock, db=db), inp.zone_id)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

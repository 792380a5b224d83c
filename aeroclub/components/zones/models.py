"""
Zone conversion component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from aeroclub.core.entities import LocalDate, LocalDateTime, LocalTime

# How to resolve a wall-clock time that occurs twice ("fall back" overlap)
AmbiguityPolicy = Literal["earlier", "later", "reject"]

# How a local -> instant conversion was settled
Resolution = Literal["exact", "ambiguous", "skipped", "non_convergent"]


@dataclass(frozen=True)
class ToLocalInput:
    """Input for localizing an instant."""

    instant: datetime
    zone_id: str


@dataclass(frozen=True)
class ToLocalOutput:
    """Localized wall clock for an instant."""

    local: LocalDateTime
    zone_id: str
    fell_back_to_utc: bool = False


@dataclass(frozen=True)
class ToInstantInput:
    """Input for converting a wall-clock time to an instant."""

    local_date: LocalDate
    local_time: LocalTime
    zone_id: str
    ambiguity: AmbiguityPolicy = "earlier"


@dataclass(frozen=True)
class ToInstantOutput:
    """Result of the fixed-point search."""

    instant: datetime
    iterations: int
    resolution: Resolution
    fell_back_to_utc: bool = False

    @property
    def converged(self) -> bool:
        return self.resolution != "non_convergent"


@dataclass(frozen=True)
class TodayInput:
    """Input for today's local date in a zone."""

    zone_id: str


@dataclass(frozen=True)
class TodayOutput:
    date: LocalDate
    zone_id: str

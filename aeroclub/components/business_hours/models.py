"""
Business hours component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from aeroclub.core.entities import LocalTime


class BusinessHours(BaseModel):
    """Tenant opening hours, as local wall-clock times."""

    model_config = ConfigDict(frozen=True)

    open_time: str = Field(default="08:00:00", pattern=r"^\d{2}:\d{2}:\d{2}$")
    close_time: str = Field(default="17:00:00", pattern=r"^\d{2}:\d{2}:\d{2}$")
    is_24_hours: bool = False
    is_closed: bool = False

    @property
    def opens(self) -> LocalTime:
        return LocalTime.parse(self.open_time)

    @property
    def closes(self) -> LocalTime:
        return LocalTime.parse(self.close_time)

    @property
    def wraps_midnight(self) -> bool:
        return self.closes <= self.opens


@dataclass(frozen=True)
class OpenCheckInput:
    """Input for checking whether the business is open at an instant."""

    instant: datetime
    hours: BusinessHours
    zone_id: str


@dataclass(frozen=True)
class OpenCheckOutput:
    is_open: bool
    local_time: LocalTime
    reason: str

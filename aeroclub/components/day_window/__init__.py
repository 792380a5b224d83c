"""
Day window component - local calendar-day windows and date arithmetic.
"""

from .component import (
    add_days,
    day_of_week,
    day_range,
    days_between,
    is_instant_on_local_date,
    run,
)
from .models import (
    WEEKDAY_NAMES,
    AddDaysInput,
    AddDaysOutput,
    DayOfWeekInput,
    DayOfWeekOutput,
    DayRange,
    DayRangeInput,
)

__all__ = [
    # Functions
    "add_days",
    "day_of_week",
    "day_range",
    "days_between",
    "is_instant_on_local_date",
    "run",
    # Models
    "AddDaysInput",
    "AddDaysOutput",
    "DayOfWeekInput",
    "DayOfWeekOutput",
    "DayRange",
    "DayRangeInput",
    "WEEKDAY_NAMES",
]

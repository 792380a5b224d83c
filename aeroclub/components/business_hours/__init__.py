"""
Business hours component - "is the business currently open".
"""

from .component import check_open, is_open_at, is_open_now, opening_range, run
from .models import BusinessHours, OpenCheckInput, OpenCheckOutput

__all__ = [
    "check_open",
    "is_open_at",
    "is_open_now",
    "opening_range",
    "run",
    "BusinessHours",
    "OpenCheckInput",
    "OpenCheckOutput",
]

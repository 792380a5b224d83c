"""aeroclub calendar-time core.

Zoned wall-clock conversion, local calendar-day windows and recurring
membership/billing year arithmetic for the aero-club operations backend.
"""

__version__ = "0.1.0"

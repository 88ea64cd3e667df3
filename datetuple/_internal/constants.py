"""Internal constants for datetuple.

These constants define the supported range, unit conversions and the
English month abbreviations used by readable formats. This module is not
part of the public API.
"""

from __future__ import annotations

# Time unit conversions
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24

# Supported year range (inclusive)
MIN_YEAR: int = 0
MAX_YEAR: int = 9999

MONTHS_PER_YEAR: int = 12

# Flat month index range: year * 12 + (month - 1)
MIN_MONTH_INDEX: int = MIN_YEAR * MONTHS_PER_YEAR
MAX_MONTH_INDEX: int = MAX_YEAR * MONTHS_PER_YEAR + MONTHS_PER_YEAR - 1  # 119_999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Three-letter English abbreviations, 1-indexed like DAYS_IN_MONTH
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "MONTHS_PER_YEAR",
    "MIN_MONTH_INDEX",
    "MAX_MONTH_INDEX",
    "DAYS_IN_MONTH",
    "MONTH_ABBREVIATIONS",
]

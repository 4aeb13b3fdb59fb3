"""Internal constants for Isocalc.

These constants define the magic numbers used by the calendar
conversions. This module is not part of the public API.
"""

from __future__ import annotations

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

# Days before each month (cumulative), for non-leap years
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# Gregorian cycle lengths in days
DAYS_PER_400_YEARS: int = 146097
DAYS_PER_100_YEARS: int = 36524
DAYS_PER_4_YEARS: int = 1461
DAYS_PER_YEAR: int = 365
DAYS_PER_WEEK: int = 7

# Day count of 1858-11-17 (MJD 0) counted from 0001-01-01 = 1
MJD_EPOCH_ORDINAL: int = 678576

# ISO weekday of MJD 0 (1858-11-17 was a Wednesday)
MJD_EPOCH_WEEKDAY: int = 3

MONTHS_PER_YEAR: int = 12


__all__ = [
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_YEAR",
    "DAYS_PER_WEEK",
    "MJD_EPOCH_ORDINAL",
    "MJD_EPOCH_WEEKDAY",
    "MONTHS_PER_YEAR",
]

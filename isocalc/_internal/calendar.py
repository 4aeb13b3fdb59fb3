"""Calendar utilities for Isocalc.

This module provides internal functions for calendar calculations:
leap year logic and lossless conversions between the canonical day
count and the three ISO 8601 date coordinate systems:

    - calendar dates (year, month, day)
    - ordinal dates (year, day of year)
    - week dates (week-year, week, weekday)

The day count is the Modified Julian Day number. MJD 0 = 1858-11-17.
All conversions use the proleptic Gregorian calendar and are defined
for every integer, including year 0 and negative years.

This module is not part of the public API.
"""

from __future__ import annotations

from isocalc._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_4_YEARS,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    MJD_EPOCH_ORDINAL,
    MJD_EPOCH_WEEKDAY,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _days_before_year(year: int) -> int:
    """Return the rata die ordinal of December 31 of the previous year.

    The rata die ordinal counts 0001-01-01 as day 1. Python's floor
    division makes the formula valid for year 0 and negative years.
    """
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day of year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ymd_to_day_count(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a day count.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The MJD day count.

    Examples:
        >>> ymd_to_day_count(1858, 11, 17)
        0
        >>> ymd_to_day_count(1970, 1, 1)
        40587
    """
    ordinal = _days_before_year(year) + _days_before_month(year, month) + day
    return ordinal - MJD_EPOCH_ORDINAL


def day_count_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert a day count to year, month, day.

    Args:
        days: The MJD day count (any integer).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> day_count_to_ymd(0)
        (1858, 11, 17)
        >>> day_count_to_ymd(-678576)
        (0, 12, 31)
    """
    # n is 0-indexed from 0001-01-01; divmod floors so the 400-year
    # cycle absorbs the sign and the remainders are always non-negative
    n = days + MJD_EPOCH_ORDINAL - 1

    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, DAYS_PER_100_YEARS)
    n4, n = divmod(n, DAYS_PER_4_YEARS)
    n1, n = divmod(n, DAYS_PER_YEAR)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def ordinal_date_to_day_count(year: int, day_of_year: int) -> int:
    """Convert an ordinal date (year, day of year) to a day count.

    Args:
        year: The year.
        day_of_year: The 1-based day of the year.

    Returns:
        The MJD day count.
    """
    return _days_before_year(year) + day_of_year - MJD_EPOCH_ORDINAL


def day_count_to_ordinal_date(days: int) -> tuple[int, int]:
    """Convert a day count to an ordinal date.

    Args:
        days: The MJD day count.

    Returns:
        Tuple of (year, day_of_year), day_of_year in 1-366.

    Examples:
        >>> day_count_to_ordinal_date(ymd_to_day_count(2024, 12, 31))
        (2024, 366)
    """
    year, _, _ = day_count_to_ymd(days)
    return (year, days - ordinal_date_to_day_count(year, 1) + 1)


def day_of_week(days: int) -> int:
    """Return the ISO weekday of a day count (1=Monday, 7=Sunday).

    Examples:
        >>> day_of_week(0)  # 1858-11-17 was a Wednesday
        3
    """
    return (days + MJD_EPOCH_WEEKDAY - 1) % DAYS_PER_WEEK + 1


def _week_one_monday(week_year: int) -> int:
    """Return the day count of the Monday starting week 1 of a week-year.

    Week 1 is the week containing January 4th.
    """
    jan4 = ymd_to_day_count(week_year, 1, 4)
    return jan4 - day_of_week(jan4) + 1


def week_date_to_day_count(week_year: int, week: int, weekday: int) -> int:
    """Convert an ISO week date to a day count.

    Args:
        week_year: The ISO week-numbering year.
        week: The week number (1-53).
        weekday: The ISO weekday (1=Monday, 7=Sunday).

    Returns:
        The MJD day count.

    Examples:
        >>> day_count_to_ymd(week_date_to_day_count(2004, 53, 6))
        (2005, 1, 1)
    """
    return _week_one_monday(week_year) + (week - 1) * DAYS_PER_WEEK + weekday - 1


def day_count_to_week_date(days: int) -> tuple[int, int, int]:
    """Convert a day count to an ISO week date.

    The week-year is the Gregorian year of the Thursday in the same
    week, so it differs from the calendar year for some days around
    January 1st.

    Args:
        days: The MJD day count.

    Returns:
        Tuple of (week_year, week, weekday).

    Examples:
        >>> day_count_to_week_date(ymd_to_day_count(2005, 1, 1))
        (2004, 53, 6)
        >>> day_count_to_week_date(ymd_to_day_count(2000, 1, 1))
        (1999, 52, 6)
    """
    weekday = day_of_week(days)
    thursday = days - weekday + 4
    week_year, _, _ = day_count_to_ymd(thursday)
    week = (thursday - ymd_to_day_count(week_year, 1, 1)) // DAYS_PER_WEEK + 1
    return (week_year, week, weekday)


def weeks_in_year(week_year: int) -> int:
    """Return the number of ISO weeks (52 or 53) in a week-year.

    A week-year has 53 weeks when January 1st is a Thursday, or when
    it is a leap year and January 1st is a Wednesday.

    Examples:
        >>> weeks_in_year(2004)
        53
        >>> weeks_in_year(2005)
        52
    """
    jan1 = day_of_week(ymd_to_day_count(week_year, 1, 1))
    if jan1 == 4 or (jan1 == 3 and is_leap_year(week_year)):
        return 53
    return 52


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_day_count",
    "day_count_to_ymd",
    "ordinal_date_to_day_count",
    "day_count_to_ordinal_date",
    "day_of_week",
    "week_date_to_day_count",
    "day_count_to_week_date",
    "weeks_in_year",
]

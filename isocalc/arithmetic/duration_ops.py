"""Duration arithmetic for dates.

This module applies a Duration to a Date: years and months first, as one
month shift, then weeks and days as a day offset.

Clamping behavior:
    The year and month components are combined into a single count of
    months (years * 12 + months) and applied in one step with year carry.
    If the landed month is shorter than the starting day (Feb 29 in a
    common year, the 31st of a 30-day month), the day is clamped once to
    the last day of that month. Weeks and days are then added as plain
    days.

Examples:
    Date(2019, 1, 31) + Duration(months=1)           -> Date(2019, 2, 28)
    Date(2020, 2, 29) + Duration(years=1)            -> Date(2021, 2, 28)
    Date(2020, 2, 29) + Duration(years=1, months=1)  -> Date(2021, 3, 29)

Because of clamping, adding a duration and then its negation does not
always return the original date.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isocalc._internal.calendar import (
    day_count_to_ymd,
    days_in_month,
    ymd_to_day_count,
)
from isocalc._internal.constants import MONTHS_PER_YEAR

if TYPE_CHECKING:
    from isocalc.core.date import Date
    from isocalc.core.duration import Duration


def shift_years(year: int, month: int, day: int, years: int) -> tuple[int, int, int]:
    """Step the year field, clamping the day to the landed month."""
    year += years
    return (year, month, min(day, days_in_month(year, month)))


def shift_months(
    year: int, month: int, day: int, months: int
) -> tuple[int, int, int]:
    """Step the month field with year carry, clamping the day.

    Examples:
        >>> shift_months(2024, 11, 30, 3)
        (2025, 2, 28)
        >>> shift_months(2024, 1, 15, -1)
        (2023, 12, 15)
    """
    total_months = year * MONTHS_PER_YEAR + (month - 1) + months
    year, month_index = divmod(total_months, MONTHS_PER_YEAR)
    month = month_index + 1
    return (year, month, min(day, days_in_month(year, month)))


def add_duration_to_date(date: Date, duration: Duration) -> Date:
    """Add a Duration to a Date.

    The components are scaled by ``duration.factor`` and applied in order:
    1. Years and months, as one month shift with year carry (day clamped
       once, against the landed month)
    2. Weeks, as seven days each
    3. Days

    Args:
        date: The date to add to.
        duration: The duration to add.

    Returns:
        A new Date offset by the duration.

    Examples:
        >>> from isocalc.core.date import Date
        >>> from isocalc.core.duration import Duration
        >>> add_duration_to_date(Date(2019, 1, 31), Duration(months=1))
        Date(2019, 2, 28)
        >>> add_duration_to_date(Date(2020, 2, 29), Duration(years=1, months=1))
        Date(2021, 3, 29)
    """
    from isocalc.core.date import Date

    year, month, day = day_count_to_ymd(date.day_count)

    months = duration.scaled_years * MONTHS_PER_YEAR + duration.scaled_months
    if months:
        year, month, day = shift_months(year, month, day, months)

    return Date.from_day_count(
        ymd_to_day_count(year, month, day) + duration.scaled_days
    )


def subtract_duration_from_date(date: Date, duration: Duration) -> Date:
    """Subtract a Duration from a Date.

    This is equivalent to adding the negated duration.

    Examples:
        >>> from isocalc.core.date import Date
        >>> from isocalc.core.duration import Duration
        >>> subtract_duration_from_date(Date(2024, 3, 31), Duration(months=1))
        Date(2024, 2, 29)
    """
    return add_duration_to_date(date, -duration)


__all__ = [
    "shift_years",
    "shift_months",
    "add_duration_to_date",
    "subtract_duration_from_date",
]

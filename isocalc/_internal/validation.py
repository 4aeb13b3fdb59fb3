"""Validation utilities for Isocalc.

This module provides range checks for calendar components. Each check
raises ValidationError naming the component, the valid range and the
rejected value.

This module is not part of the public API.
"""

from __future__ import annotations

from isocalc._internal.calendar import days_in_month, days_in_year, weeks_in_year
from isocalc.errors import ValidationError


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_day_of_year(year: int, day_of_year: int) -> None:
    """Validate that a day of year exists in the given year.

    Raises:
        ValidationError: If day_of_year is outside 1-365 (1-366 in leap years).
    """
    max_day = days_in_year(year)
    if day_of_year < 1 or day_of_year > max_day:
        raise ValidationError(
            f"day of year must be between 1 and {max_day} for {year}, "
            f"got {day_of_year}"
        )


def validate_week(week_year: int, week: int) -> None:
    """Validate that a week number exists in the given ISO week-year.

    Raises:
        ValidationError: If week is outside 1-52 (1-53 in long week-years).
    """
    max_week = weeks_in_year(week_year)
    if week < 1 or week > max_week:
        raise ValidationError(
            f"week must be between 1 and {max_week} for {week_year}, got {week}"
        )


def validate_weekday(weekday: int) -> None:
    """Validate that an ISO weekday is within 1-7.

    Raises:
        ValidationError: If weekday is outside 1-7.
    """
    if weekday < 1 or weekday > 7:
        raise ValidationError(f"weekday must be between 1 and 7, got {weekday}")


__all__ = [
    "validate_month",
    "validate_day",
    "validate_day_of_year",
    "validate_week",
    "validate_weekday",
]

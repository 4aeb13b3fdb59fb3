"""Isocalc exception hierarchy.

All Isocalc-specific exceptions inherit from IsocalcError.
"""

from __future__ import annotations


class IsocalcError(Exception):
    """Base exception for all Isocalc errors."""

    pass


class ValidationError(IsocalcError):
    """Invalid input values.

    Raised when a calendar component is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Week value beyond the weeks in the week-year
    """

    pass


class ParseError(IsocalcError):
    """Failed to parse string representation.

    Raised when a string cannot be parsed as a date or a duration, or
    when the parsed fields are out of range.

    Examples:
        - Text matching none of the ISO 8601 date notations
        - "2019-13-01" (month out of range)
        - A duration without any unit field
    """

    pass


class YearOverflowError(IsocalcError):
    """Year cannot be rendered in the requested notation.

    Raised by the formatter when the year field would not round-trip:
    negative years in dashed notation, or anything other than exactly
    four digits in undashed notation.

    Attributes:
        year: The offending year as it would have been rendered.
    """

    def __init__(self, year: str, message: str | None = None) -> None:
        self.year = year
        super().__init__(message or f"year {year} cannot be represented")


class UsageError(IsocalcError):
    """Arguments do not match any recognized command shape."""

    pass


__all__ = [
    "IsocalcError",
    "ValidationError",
    "ParseError",
    "YearOverflowError",
    "UsageError",
]

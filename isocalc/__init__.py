"""Isocalc: ISO 8601 calendar calculations.

Isocalc parses dates in the ISO 8601 calendar, week and ordinal
notations, converts between them, applies day offsets and calendar
durations, and counts the days between two dates. All calendar math
is proleptic Gregorian and implemented on a single integer day count.

Core Types:
    Date: Calendar date with calendar, ordinal and week date views
    Duration: Signed years/months/weeks/days offset with repeat factor

Format Functions:
    parse_date: Parse any of the six ISO 8601 date spellings
    format_date: Render a Date in a chosen notation
    parse_duration: Parse a duration such as 2P1Y-1M
    format_duration: Render a Duration

Exceptions:
    IsocalcError: Base exception
    ValidationError: Invalid calendar components
    ParseError: Failed to parse string
    YearOverflowError: Year cannot be rendered in the chosen notation
    UsageError: Arguments match no command shape

Example:
    >>> from isocalc import Date, parse_date, parse_duration, format_date
    >>> d = parse_date("2019-01-31") + parse_duration("1M")
    >>> format_date(d)
    '2019-02-28'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from isocalc.core.date import Date
from isocalc.core.duration import Duration

# Exceptions
from isocalc.errors import (
    IsocalcError,
    ParseError,
    UsageError,
    ValidationError,
    YearOverflowError,
)

# Format functions
from isocalc.format import (
    Notation,
    format_date,
    format_duration,
    parse_date,
    parse_duration,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Duration",
    "Notation",
    # Exceptions
    "IsocalcError",
    "ValidationError",
    "ParseError",
    "YearOverflowError",
    "UsageError",
    # Format functions
    "parse_date",
    "format_date",
    "parse_duration",
    "format_duration",
]

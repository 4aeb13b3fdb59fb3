"""Date and duration formatting and parsing.

This module provides functions for converting Isocalc values to and
from string representations:
    - ISO 8601 calendar, week and ordinal dates, dashed or undashed
    - the duration grammar ([nP][nY][nM][nW][nD])

Functions:
    parse_date: Parse an ISO 8601 date string.
    parse_date_with_notation: Parse a date and report its notation.
    format_date: Render a Date in a chosen notation.
    parse_duration: Parse a duration string.
    format_duration: Render a Duration.

Examples:
    >>> from isocalc.format import parse_date, format_date, Notation
    >>> format_date(parse_date("2000-01-01"), Notation.WEEK)
    '1999-W52-6'
"""

from __future__ import annotations

from isocalc.format.duration import format_duration, parse_duration
from isocalc.format.iso8601 import format_date, parse_date, parse_date_with_notation
from isocalc.format.notation import Notation

__all__: list[str] = [
    "Notation",
    # ISO 8601 dates
    "parse_date",
    "parse_date_with_notation",
    "format_date",
    # Durations
    "parse_duration",
    "format_duration",
]

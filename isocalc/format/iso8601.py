"""ISO 8601 date formatting and parsing.

This module provides functions for converting dates to and from the
three ISO 8601 date notations, each in a dashed (extended) and an
undashed (basic) spelling.

Functions:
    parse_date: Parse a date string into a Date.
    parse_date_with_notation: Parse and also report the notation used.
    format_date: Render a Date in a chosen notation.

Supported forms:
    Calendar dates:
        - YYYY-MM-DD (YYYY is four or more digits)
        - YYYYMMDD
    Week dates:
        - YYYY-Www-D
        - YYYYWwwD
    Ordinal dates:
        - YYYY-DDD
        - YYYYDDD

The undashed forms take exactly four year digits, since a longer year
could not be told apart from the fields that follow it. The "W" is
case-insensitive. Years are taken literally, with no two-digit year
expansion.

Examples:
    >>> from isocalc.format import parse_date, format_date
    >>> d = parse_date("2005-01-01")
    >>> format_date(d, "week")
    '2004-W53-6'
    >>> format_date(d, "ordinal", dashed=False)
    '2005001'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from isocalc.errors import ParseError, ValidationError, YearOverflowError
from isocalc.format.notation import Notation

if TYPE_CHECKING:
    from isocalc.core.date import Date


@dataclass(frozen=True)
class DateForm:
    """One accepted date spelling.

    Attributes:
        notation: The notation this form encodes.
        dashed: True for the extended (dashed) spelling.
        pattern: Compiled regex that must match the whole text.
    """

    notation: Notation
    dashed: bool
    pattern: re.Pattern[str]


DATE_FORMS: tuple[DateForm, ...] = (
    DateForm(
        Notation.CALENDAR, True, re.compile(r"(\d{4,})-(\d{2})-(\d{2})", re.ASCII)
    ),
    DateForm(
        Notation.WEEK, True, re.compile(r"(\d{4,})-[Ww](\d{2})-(\d)", re.ASCII)
    ),
    DateForm(Notation.ORDINAL, True, re.compile(r"(\d{4,})-(\d{3})", re.ASCII)),
    DateForm(
        Notation.CALENDAR, False, re.compile(r"(\d{4})(\d{2})(\d{2})", re.ASCII)
    ),
    DateForm(Notation.WEEK, False, re.compile(r"(\d{4})[Ww](\d{2})(\d)", re.ASCII)),
    DateForm(Notation.ORDINAL, False, re.compile(r"(\d{4})(\d{3})", re.ASCII)),
)


def _build_date(notation: Notation, fields: tuple[int, ...]) -> Date:
    from isocalc.core.date import Date

    if notation is Notation.CALENDAR:
        return Date(*fields)
    if notation is Notation.WEEK:
        return Date.from_week_date(*fields)
    return Date.from_ordinal_date(*fields)


def parse_date_with_notation(s: str) -> tuple[Date, Notation, bool]:
    """Parse a date string and report which notation it was written in.

    Args:
        s: The date text, already stripped of surrounding whitespace.

    Returns:
        Tuple of (date, notation, dashed).

    Raises:
        ParseError: If the text matches no form or a field is out of range.

    Examples:
        >>> parse_date_with_notation("2004w536")
        (Date(2005, 1, 1), <Notation.WEEK: 'week'>, False)
    """
    for form in DATE_FORMS:
        match = form.pattern.fullmatch(s)
        if match is None:
            continue
        fields = tuple(int(group) for group in match.groups())
        try:
            date = _build_date(form.notation, fields)
        except ValidationError as exc:
            raise ParseError(f"invalid date {s!r}: {exc}") from exc
        return (date, form.notation, form.dashed)

    raise ParseError(
        f"invalid date format: {s!r}. "
        "Expected YYYY-MM-DD, YYYY-Www-D, YYYY-DDD or their undashed forms"
    )


def parse_date(s: str) -> Date:
    """Parse a date string in any supported ISO 8601 notation.

    Args:
        s: The date text.

    Returns:
        The parsed Date.

    Raises:
        ParseError: If the text matches no form or a field is out of range.

    Examples:
        >>> parse_date("2019-01-31")
        Date(2019, 1, 31)

        >>> parse_date("2019-13-01")
        Traceback (most recent call last):
        ...
        isocalc.errors.ParseError: invalid date '2019-13-01': month must be between 1 and 12, got 13
    """
    date, _, _ = parse_date_with_notation(s)
    return date


def _render_year(year: int, dashed: bool) -> str:
    """Render the year field, raising YearOverflowError if it cannot round-trip."""
    rendered = f"{year:04d}"
    if year < 0:
        raise YearOverflowError(
            rendered, f"year {rendered} is negative and cannot be represented"
        )
    if not dashed and len(rendered) != 4:
        raise YearOverflowError(
            rendered, f"year {rendered} does not fit the four-digit basic format"
        )
    return rendered


def format_date(
    date: Date,
    notation: Union[Notation, str] = Notation.CALENDAR,
    *,
    dashed: bool = True,
) -> str:
    """Format a Date in one of the ISO 8601 date notations.

    Args:
        date: The date to render.
        notation: Notation.CALENDAR, Notation.WEEK or Notation.ORDINAL
            (or their string values).
        dashed: Use the extended (dashed) spelling; False gives the basic
            spelling.

    Returns:
        The rendered date.

    Raises:
        YearOverflowError: If the year field (the week-year for week
            notation) is negative, or is not exactly four digits in
            undashed mode.
        ValidationError: If notation is not a known Notation or value.

    Examples:
        >>> from isocalc.core.date import Date
        >>> format_date(Date(1981, 12, 31), Notation.WEEK)
        '1981-W53-4'
        >>> format_date(Date(99999, 3, 1))
        '99999-03-01'
        >>> format_date(Date(99999, 3, 1), dashed=False)
        Traceback (most recent call last):
        ...
        isocalc.errors.YearOverflowError: year 99999 does not fit the four-digit basic format
    """
    try:
        notation = Notation(notation)
    except ValueError as exc:
        names = ", ".join(n.value for n in Notation)
        raise ValidationError(
            f"unknown notation {notation!r}, expected one of {names}"
        ) from exc
    sep = "-" if dashed else ""

    if notation is Notation.WEEK:
        week_year, week, weekday = date.to_week_date()
        year = _render_year(week_year, dashed)
        return f"{year}{sep}W{week:02d}{sep}{weekday}"

    if notation is Notation.ORDINAL:
        ordinal_year, day_of_year = date.to_ordinal_date()
        year = _render_year(ordinal_year, dashed)
        return f"{year}{sep}{day_of_year:03d}"

    calendar_year, month, day = date.to_ymd()
    year = _render_year(calendar_year, dashed)
    return f"{year}{sep}{month:02d}{sep}{day:02d}"


__all__ = [
    "DateForm",
    "DATE_FORMS",
    "parse_date",
    "parse_date_with_notation",
    "format_date",
]

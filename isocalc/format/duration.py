"""Duration parsing and formatting.

Grammar:
    duration := [repeat? "P"] years? months? weeks? days?
    repeat   := digit+
    years    := signed-int "Y"
    months   := signed-int "M"
    weeks    := signed-int "W"
    days     := signed-int "D"

At least one unit is required, and units appear in the order Y, M, W, D.
Letters are case-insensitive. The repeat factor defaults to 1 when
absent. A command-level ``+``/``-`` token is not part of the grammar; it
is applied afterwards with Duration.with_sign.

Examples:
    >>> parse_duration("1Y1M")
    Duration(repeat=1, years=1, months=1, sign=1)
    >>> parse_duration("3p-2d")
    Duration(repeat=3, days=-2, sign=1)
"""

from __future__ import annotations

import re

from isocalc.core.duration import Duration
from isocalc.errors import ParseError

DURATION_PATTERN = re.compile(
    r"""
    (?:(?P<repeat>\d*)P)?
    (?:(?P<years>[+-]?\d+)Y)?
    (?:(?P<months>[+-]?\d+)M)?
    (?:(?P<weeks>[+-]?\d+)W)?
    (?:(?P<days>[+-]?\d+)D)?
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

_UNITS = ("years", "months", "weeks", "days")


def parse_duration(s: str) -> Duration:
    """Parse a duration string.

    Args:
        s: The duration text, e.g. ``"P1M"``, ``"2P1W"`` or ``"+1Y-3D"``.

    Returns:
        The parsed Duration with sign +1.

    Raises:
        ParseError: If the text does not fully match the grammar or has
            no unit field.

    Examples:
        >>> parse_duration("P")
        Traceback (most recent call last):
        ...
        isocalc.errors.ParseError: duration 'P' has no year, month, week or day field
    """
    match = DURATION_PATTERN.fullmatch(s)
    if match is None:
        raise ParseError(
            f"invalid duration format: {s!r}. "
            "Expected [nP][nY][nM][nW][nD], e.g. P1M or 2P1Y-3D"
        )

    units = {
        name: int(match.group(name))
        for name in _UNITS
        if match.group(name) is not None
    }
    if not units:
        raise ParseError(f"duration {s!r} has no year, month, week or day field")

    repeat_text = match.group("repeat")
    repeat = int(repeat_text) if repeat_text else 1

    return Duration(repeat=repeat, **units)


def format_duration(duration: Duration) -> str:
    """Render a Duration in the duration grammar.

    A repeat factor other than 1 is written as a ``nP`` prefix. A negative
    overall sign is written as a leading ``-``, the way it appears as a
    separate token on the command line; such text is not itself accepted
    by parse_duration.

    Examples:
        >>> format_duration(Duration(repeat=2, years=1, days=-3))
        '2P1Y-3D'
        >>> format_duration(-Duration(weeks=1))
        '-1W'
    """
    parts = []
    if duration.sign < 0:
        parts.append("-")
    if duration.repeat != 1:
        parts.append(f"{duration.repeat}P")
    for name, letter in zip(_UNITS, "YMWD"):
        value = getattr(duration, name)
        if value is not None:
            parts.append(f"{value}{letter}")
    return "".join(parts)


__all__ = ["DURATION_PATTERN", "parse_duration", "format_duration"]

"""Command-shape evaluation for the isocalc command line.

The CLI hands over its positional arguments already tokenized. This
module recognizes which command shape they form, runs the matching
calendar operation and returns the text to print:

    []                        today
    [DATE]                    DATE, re-rendered
    [DATE] (+|-) N            DATE shifted by N days
    [DATE] (+|-) DURATION     DATE shifted by the signed duration
    [DATE] : DATE             days from the first date to the second

DATE may be the literal ``today``; when the leading DATE is omitted,
today is used.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from isocalc.config.settings import IsocalcSettings
from isocalc.core.date import Date
from isocalc.errors import UsageError
from isocalc.format.duration import parse_duration
from isocalc.format.iso8601 import format_date, parse_date_with_notation
from isocalc.format.notation import Notation

logger = logging.getLogger(__name__)

TODAY = "today"
SIGNS = {"+": 1, "-": -1}
DIFFERENCE = ":"
OPERATORS = (*SIGNS, DIFFERENCE)

_DAY_COUNT = re.compile(r"\d+", re.ASCII)


def _read_date(
    token: str, today: Date | None
) -> tuple[Date, Notation, bool]:
    """Resolve a DATE token to (date, notation, dashed)."""
    if token.lower() == TODAY:
        return (today or Date.today(), Notation.CALENDAR, True)
    return parse_date_with_notation(token)


def _render(
    date: Date, notation: Notation, dashed: bool, settings: IsocalcSettings
) -> str:
    if settings.notation is not None:
        notation = settings.notation
    if settings.dashed is not None:
        dashed = settings.dashed
    return format_date(date, notation, dashed=dashed)


def evaluate(
    args: Sequence[str],
    settings: IsocalcSettings,
    today: Date | None = None,
) -> str:
    """Evaluate one command line and return the text to print.

    Args:
        args: Positional arguments, one token each.
        settings: Output settings (notation, dashed, reverse).
        today: The current date; read from the system clock when None.

    Returns:
        The rendered date, or the day difference as a decimal integer.

    Raises:
        UsageError: If the arguments match no command shape.
        ParseError: If a date or duration token is malformed.
        YearOverflowError: If the result cannot be rendered as requested.
    """
    tokens = list(args)

    if tokens and tokens[0] not in OPERATORS:
        base, notation, dashed = _read_date(tokens.pop(0), today)
    else:
        base, notation, dashed = _read_date(TODAY, today)
    logger.debug("base date %s (%s, dashed=%s)", base, notation.value, dashed)

    if not tokens:
        return _render(base, notation, dashed, settings)

    if len(tokens) != 2 or tokens[0] not in OPERATORS:
        raise UsageError(
            f"unrecognized arguments: {' '.join(args)!r}. "
            "Expected DATE, DATE (+|-) N, DATE (+|-) DURATION or DATE : DATE"
        )

    operator, operand = tokens

    if operator == DIFFERENCE:
        other, _, _ = _read_date(operand, today)
        days = base.difference_to(other)
        if settings.reverse:
            days = -days
        logger.debug("difference from %s to %s is %d days", base, other, days)
        return str(days)

    sign = SIGNS[operator]
    if _DAY_COUNT.fullmatch(operand):
        result = base.add_days(sign * int(operand))
        logger.debug("shifted %s by %s%s days to %s", base, operator, operand, result)
    else:
        duration = parse_duration(operand).with_sign(sign)
        result = base.add_duration(duration)
        logger.debug("applied duration %s to %s giving %s", duration, base, result)
    return _render(result, notation, dashed, settings)


__all__ = ["evaluate", "TODAY"]

"""Notation enumeration for ISO 8601 date representations.

This module provides the Notation enum naming the three ISO 8601 date
notations a Date can be parsed from and rendered into.
"""

from __future__ import annotations

from enum import Enum


class Notation(Enum):
    """ISO 8601 date notation.

    Each notation has a dashed (extended) and an undashed (basic)
    spelling:

        CALENDAR: 2005-01-01 / 20050101
        WEEK:     2004-W53-6 / 2004W536
        ORDINAL:  2005-001   / 2005001

    Examples:
        >>> Notation("week")
        <Notation.WEEK: 'week'>
    """

    CALENDAR = "calendar"
    WEEK = "week"
    ORDINAL = "ordinal"


__all__ = ["Notation"]

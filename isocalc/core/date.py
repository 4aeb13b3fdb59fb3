"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates in
the proleptic Gregorian calendar, with calendar, ordinal and ISO week
date views of the same day.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from isocalc._internal.calendar import (
    day_count_to_ordinal_date,
    day_count_to_week_date,
    day_count_to_ymd,
    is_leap_year,
    ordinal_date_to_day_count,
    week_date_to_day_count,
    ymd_to_day_count,
)
from isocalc._internal.validation import (
    validate_day,
    validate_day_of_year,
    validate_month,
    validate_week,
    validate_weekday,
)
from isocalc.arithmetic.duration_ops import (
    add_duration_to_date,
    shift_months,
    shift_years,
    subtract_duration_from_date,
)

if TYPE_CHECKING:
    from isocalc.core.duration import Duration


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Internal representation is a single day count (Modified Julian Day),
    so comparison, offsetting and differencing are integer operations.
    The calendar (year, month, day) and ISO week date views are derived
    from the day count on first use and cached. Years are unbounded and
    follow astronomical numbering (year 0 exists).

    Date is immutable; all arithmetic returns a new Date.

    Attributes:
        year: The year (can be zero or negative).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2005, 1, 1)
        >>> d.to_week_date()
        (2004, 53, 6)
        >>> d.to_ordinal_date()
        (2005, 1)

        >>> Date(2019, 1, 1).difference_to(Date(2019, 1, 10))
        9
    """

    __slots__ = ("_days", "_ymd", "_week_date")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            ValidationError: If month or day is out of range.

        Examples:
            >>> Date(2024, 2, 30)
            Traceback (most recent call last):
            ...
            isocalc.errors.ValidationError: day must be between 1 and 29 for 2024-02, got 30
        """
        validate_month(month)
        validate_day(year, month, day)

        self._days = ymd_to_day_count(year, month, day)
        self._ymd: tuple[int, int, int] | None = (year, month, day)
        self._week_date: tuple[int, int, int] | None = None

    @classmethod
    def from_day_count(cls, days: int) -> Date:
        """Create a Date from a day count (MJD); always succeeds.

        Examples:
            >>> Date.from_day_count(0)
            Date(1858, 11, 17)
        """
        date = cls.__new__(cls)
        date._days = days
        date._ymd = None
        date._week_date = None
        return date

    @classmethod
    def from_ordinal_date(cls, year: int, day_of_year: int) -> Date:
        """Create a Date from an ordinal date.

        Raises:
            ValidationError: If day_of_year does not exist in the year.

        Examples:
            >>> Date.from_ordinal_date(2024, 60)
            Date(2024, 2, 29)
        """
        validate_day_of_year(year, day_of_year)
        return cls.from_day_count(ordinal_date_to_day_count(year, day_of_year))

    @classmethod
    def from_week_date(cls, week_year: int, week: int, weekday: int) -> Date:
        """Create a Date from an ISO week date.

        Raises:
            ValidationError: If week or weekday is out of range.

        Examples:
            >>> Date.from_week_date(1981, 53, 4)
            Date(1981, 12, 31)
        """
        validate_weekday(weekday)
        validate_week(week_year, week)
        return cls.from_day_count(week_date_to_day_count(week_year, week, weekday))

    @classmethod
    def today(cls) -> Date:
        """Return today's date from the system clock."""
        import datetime

        now = datetime.date.today()
        return cls(now.year, now.month, now.day)

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date in any of the ISO 8601 date notations.

        Raises:
            ParseError: If the string is not a valid date.

        Examples:
            >>> Date.from_iso_format("2004-W53-6")
            Date(2005, 1, 1)
            >>> Date.from_iso_format("2005001")
            Date(2005, 1, 1)
        """
        from isocalc.format.iso8601 import parse_date

        return parse_date(s)

    def to_ymd(self) -> tuple[int, int, int]:
        """Return the calendar view as (year, month, day)."""
        if self._ymd is None:
            self._ymd = day_count_to_ymd(self._days)
        return self._ymd

    def to_ordinal_date(self) -> tuple[int, int]:
        """Return the ordinal view as (year, day_of_year)."""
        return day_count_to_ordinal_date(self._days)

    def to_week_date(self) -> tuple[int, int, int]:
        """Return the ISO week date view as (week_year, week, weekday)."""
        if self._week_date is None:
            self._week_date = day_count_to_week_date(self._days)
        return self._week_date

    @property
    def day_count(self) -> int:
        """Return the canonical day count (MJD)."""
        return self._days

    @property
    def year(self) -> int:
        return self.to_ymd()[0]

    @property
    def month(self) -> int:
        return self.to_ymd()[1]

    @property
    def day(self) -> int:
        return self.to_ymd()[2]

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
            >>> Date(2023, 12, 31).day_of_year
            365
        """
        return self.to_ordinal_date()[1]

    @property
    def week_year(self) -> int:
        """Return the ISO week-numbering year.

        Examples:
            >>> Date(2000, 1, 1).week_year
            1999
        """
        return self.to_week_date()[0]

    @property
    def week(self) -> int:
        """Return the ISO week number (1-53)."""
        return self.to_week_date()[1]

    @property
    def weekday(self) -> int:
        """Return the ISO weekday (1=Monday, 7=Sunday).

        Examples:
            >>> Date(2024, 1, 15).weekday  # Monday
            1
            >>> Date(2024, 1, 21).weekday  # Sunday
            7
        """
        return self.to_week_date()[2]

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Examples:
            >>> Date(2024, 1, 15).add_days(-20)
            Date(2023, 12, 26)
        """
        return Date.from_day_count(self._days + days)

    def add_years(self, years: int) -> Date:
        """Return a new Date offset by whole years, clamping Feb 29.

        Examples:
            >>> Date(2024, 2, 29).add_years(1)
            Date(2025, 2, 28)
        """
        return Date(*shift_years(*self.to_ymd(), years))

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by whole months, clamping the day.

        Examples:
            >>> Date(2024, 1, 31).add_months(1)
            Date(2024, 2, 29)
            >>> Date(2023, 1, 31).add_months(1)
            Date(2023, 2, 28)
        """
        return Date(*shift_months(*self.to_ymd(), months))

    def add_duration(self, duration: Duration) -> Date:
        """Return a new Date offset by a Duration.

        Years and months are applied together as one month shift, then
        weeks and days; see isocalc.arithmetic.duration_ops for the
        clamping rules.

        Examples:
            >>> from isocalc.core.duration import Duration
            >>> Date(2020, 2, 29).add_duration(Duration(years=1, months=1))
            Date(2021, 3, 29)
        """
        return add_duration_to_date(self, duration)

    def subtract_duration(self, duration: Duration) -> Date:
        """Return a new Date offset by the negated Duration."""
        return subtract_duration_from_date(self, duration)

    def difference_to(self, other: Date) -> int:
        """Return the number of days from this date up to ``other``.

        The count includes this date and excludes ``other``; it is
        positive when ``other`` is later.

        Examples:
            >>> Date(2019, 1, 10).difference_to(Date(2019, 1, 1))
            -9
        """
        return other._days - self._days

    @overload
    def __add__(self, other: int) -> Date: ...

    @overload
    def __add__(self, other: Duration) -> Date: ...

    def __add__(self, other: object) -> Date:
        """Add a number of days or a Duration to this date."""
        from isocalc.core.duration import Duration

        if isinstance(other, bool):
            return NotImplemented  # type: ignore[return-value]
        if isinstance(other, int):
            return self.add_days(other)
        if isinstance(other, Duration):
            return self.add_duration(other)
        return NotImplemented  # type: ignore[return-value]

    def __radd__(self, other: object) -> Date:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Date) -> int: ...

    @overload
    def __sub__(self, other: int) -> Date: ...

    @overload
    def __sub__(self, other: Duration) -> Date: ...

    def __sub__(self, other: object) -> Date | int:
        """Subtract a Date, a number of days, or a Duration.

        Subtracting a Date returns the signed day difference.

        Examples:
            >>> Date(2024, 1, 25) - Date(2024, 1, 15)
            10
        """
        from isocalc.core.duration import Duration

        if isinstance(other, Date):
            return other.difference_to(self)
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            return self.add_days(-other)
        if isinstance(other, Duration):
            return self.subtract_duration(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        """Return a hash based on the day count."""
        return hash(self._days)

    def __repr__(self) -> str:
        """Return a detailed string representation like 'Date(2024, 1, 15)'."""
        year, month, day = self.to_ymd()
        return f"Date({year}, {month}, {day})"

    def to_iso_format(self) -> str:
        """Return the date as YYYY-MM-DD.

        Unlike isocalc.format.format_date, this never fails: negative
        years get a leading minus sign.

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'
            >>> Date(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        year, month, day = self.to_ymd()
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        else:
            return f"{year:05d}-{month:02d}-{day:02d}"

    def __str__(self) -> str:
        """Return the ISO 8601 calendar representation."""
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["Date"]

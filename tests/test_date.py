"""Tests for the Date class."""

from __future__ import annotations

import datetime

import pytest

from isocalc._internal.calendar import day_count_to_ordinal_date
from isocalc.core.date import Date
from isocalc.core.duration import Duration
from isocalc.errors import ParseError, ValidationError


class TestDateConstruction:
    """Tests for Date construction and validation."""

    def test_basic_construction(self) -> None:
        """Test basic date construction."""
        d = Date(2024, 1, 15)
        assert d.year == 2024
        assert d.month == 1
        assert d.day == 15

    def test_construction_leap_year_february(self) -> None:
        """Test construction of Feb 29 in leap year."""
        assert Date(2024, 2, 29).day == 29

    def test_construction_invalid_month_13(self) -> None:
        """Test that month 13 raises ValidationError."""
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            Date(2024, 13, 1)

    def test_construction_invalid_day_zero(self) -> None:
        """Test that day 0 raises ValidationError."""
        with pytest.raises(ValidationError, match="day must be between 1 and"):
            Date(2024, 1, 0)

    def test_construction_invalid_feb_29_non_leap(self) -> None:
        """Test that Feb 29 raises ValidationError in non-leap year."""
        with pytest.raises(ValidationError, match="day must be between 1 and 28"):
            Date(2023, 2, 29)

    def test_construction_unbounded_years(self) -> None:
        """Years are not limited to four digits."""
        assert Date(99999, 12, 31).year == 99999
        assert Date(-12345, 1, 1).year == -12345

    def test_from_day_count(self) -> None:
        """Day count 0 is 1858-11-17."""
        assert Date.from_day_count(0) == Date(1858, 11, 17)
        assert Date(1970, 1, 1).day_count == 40587

    def test_from_ordinal_date(self) -> None:
        """Ordinal construction including the leap day."""
        assert Date.from_ordinal_date(2024, 60) == Date(2024, 2, 29)
        assert Date.from_ordinal_date(2023, 60) == Date(2023, 3, 1)

    def test_from_ordinal_date_out_of_range(self) -> None:
        """Day 366 exists only in leap years."""
        assert Date.from_ordinal_date(2024, 366) == Date(2024, 12, 31)
        with pytest.raises(ValidationError, match="day of year"):
            Date.from_ordinal_date(2023, 366)
        with pytest.raises(ValidationError):
            Date.from_ordinal_date(2023, 0)

    def test_from_week_date(self) -> None:
        """Week dates across the year boundary."""
        assert Date.from_week_date(2004, 53, 6) == Date(2005, 1, 1)
        assert Date.from_week_date(1999, 52, 6) == Date(2000, 1, 1)

    def test_from_week_date_out_of_range(self) -> None:
        """Week 53 only exists in long week-years; weekday is 1-7."""
        with pytest.raises(ValidationError, match="week must be between 1 and 52"):
            Date.from_week_date(2005, 53, 1)
        with pytest.raises(ValidationError, match="weekday"):
            Date.from_week_date(2005, 1, 8)
        with pytest.raises(ValidationError, match="weekday"):
            Date.from_week_date(2005, 1, 0)

    def test_from_iso_format(self) -> None:
        """from_iso_format accepts every notation."""
        assert Date.from_iso_format("2005-01-01") == Date(2005, 1, 1)
        assert Date.from_iso_format("2004-W53-6") == Date(2005, 1, 1)
        assert Date.from_iso_format("2005001") == Date(2005, 1, 1)

    def test_from_iso_format_invalid(self) -> None:
        """Malformed text raises ParseError."""
        with pytest.raises(ParseError):
            Date.from_iso_format("2005/01/01")

    def test_today(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """today() reads the system clock."""

        class FixedDate(datetime.date):
            @classmethod
            def today(cls) -> FixedDate:
                return cls(2019, 1, 31)

        monkeypatch.setattr(datetime, "date", FixedDate)
        assert Date.today() == Date(2019, 1, 31)


class TestDateViews:
    """Tests for the calendar, ordinal and week views."""

    def test_views_of_one_day(self) -> None:
        """2005-01-01 seen three ways."""
        d = Date(2005, 1, 1)
        assert d.to_ymd() == (2005, 1, 1)
        assert d.to_ordinal_date() == (2005, 1)
        assert d.to_week_date() == (2004, 53, 6)

    def test_ordinal_view_matches_calendar_math(self) -> None:
        """to_ordinal_date agrees with day_count_to_ordinal_date."""
        for days in range(-700_000, 3_000_000, 9_973):
            d = Date.from_day_count(days)
            assert d.to_ordinal_date() == day_count_to_ordinal_date(days)
        assert Date(2023, 12, 31).to_ordinal_date() == (2023, 365)
        assert Date(-1, 12, 31).to_ordinal_date() == (-1, 365)
        assert Date(0, 12, 31).to_ordinal_date() == (0, 366)

    def test_ordinal_view_uses_calendar_math(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The ordinal view is derived by the calendar module."""
        import isocalc.core.date as date_module

        calls = []

        def spy(days: int) -> tuple[int, int]:
            calls.append(days)
            return day_count_to_ordinal_date(days)

        monkeypatch.setattr(date_module, "day_count_to_ordinal_date", spy)
        d = Date(2024, 3, 1)
        assert d.to_ordinal_date() == (2024, 61)
        assert calls == [d.day_count]

    def test_week_properties(self) -> None:
        """week_year, week and weekday properties."""
        d = Date(1981, 12, 31)
        assert d.week_year == 1981
        assert d.week == 53
        assert d.weekday == 4

    def test_day_of_year(self) -> None:
        """Day of year in leap and common years."""
        assert Date(2024, 12, 31).day_of_year == 366
        assert Date(2023, 12, 31).day_of_year == 365

    def test_views_from_day_count(self) -> None:
        """Views are derived lazily for dates built from a day count."""
        d = Date.from_day_count(Date(2000, 1, 1).day_count)
        assert d.to_week_date() == (1999, 52, 6)
        assert d.to_ymd() == (2000, 1, 1)

    def test_is_leap_year(self) -> None:
        """is_leap_year property."""
        assert Date(2000, 6, 1).is_leap_year
        assert not Date(1900, 6, 1).is_leap_year

    def test_immutable(self) -> None:
        """Dates have no writable attributes."""
        d = Date(2024, 1, 15)
        with pytest.raises(AttributeError):
            d.year = 2025  # type: ignore[misc]
        with pytest.raises(AttributeError):
            d.extra = 1  # type: ignore[attr-defined]


class TestDateArithmetic:
    """Tests for day offsets, year/month steps and differences."""

    def test_add_days(self) -> None:
        """add_days shifts across month and year boundaries."""
        assert Date(2024, 1, 15).add_days(10) == Date(2024, 1, 25)
        assert Date(2024, 1, 15).add_days(-20) == Date(2023, 12, 26)
        assert Date(2024, 2, 28).add_days(1) == Date(2024, 2, 29)

    def test_add_days_is_new_instance(self) -> None:
        """Arithmetic leaves the original untouched."""
        d = Date(2024, 1, 15)
        d.add_days(5)
        assert d == Date(2024, 1, 15)

    def test_add_years_clamps(self) -> None:
        """Feb 29 plus one year clamps to Feb 28."""
        assert Date(2024, 2, 29).add_years(1) == Date(2025, 2, 28)
        assert Date(2024, 2, 29).add_years(4) == Date(2028, 2, 29)

    def test_add_months_clamps(self) -> None:
        """Month stepping clamps to the month length."""
        assert Date(2024, 1, 31).add_months(1) == Date(2024, 2, 29)
        assert Date(2023, 1, 31).add_months(1) == Date(2023, 2, 28)
        assert Date(2024, 3, 31).add_months(1) == Date(2024, 4, 30)

    def test_add_months_carries_year(self) -> None:
        """Month stepping carries into the year both ways."""
        assert Date(2024, 11, 15).add_months(3) == Date(2025, 2, 15)
        assert Date(2024, 1, 15).add_months(-1) == Date(2023, 12, 15)
        assert Date(2024, 1, 15).add_months(-25) == Date(2021, 12, 15)

    def test_difference_to(self) -> None:
        """difference_to counts days to the other date."""
        a = Date(2019, 1, 1)
        b = Date(2019, 1, 10)
        assert a.difference_to(b) == 9
        assert b.difference_to(a) == -9
        assert a.difference_to(a) == 0

    def test_difference_across_leap_year(self) -> None:
        """A leap year spans 366 days."""
        assert Date(2024, 1, 1).difference_to(Date(2025, 1, 1)) == 366

    def test_operators(self) -> None:
        """+ and - with ints, Durations and Dates."""
        d = Date(2024, 1, 25)
        assert d + 7 == Date(2024, 2, 1)
        assert 7 + d == Date(2024, 2, 1)
        assert d - 25 == Date(2023, 12, 31)
        assert d - Date(2024, 1, 15) == 10
        assert Date(2019, 1, 31) + Duration(months=1) == Date(2019, 2, 28)
        assert Date(2024, 3, 31) - Duration(months=1) == Date(2024, 2, 29)

    def test_operators_reject_other_types(self) -> None:
        """Unsupported operands raise TypeError."""
        with pytest.raises(TypeError):
            Date(2024, 1, 1) + 1.5  # type: ignore[operator]
        with pytest.raises(TypeError):
            Date(2024, 1, 1) - "x"  # type: ignore[operator]


class TestDateComparison:
    """Tests for ordering, equality and hashing."""

    def test_ordering(self) -> None:
        """Dates order by day count."""
        assert Date(2024, 1, 15) < Date(2024, 1, 16)
        assert Date(-1, 12, 31) < Date(0, 1, 1)
        assert Date(2024, 1, 16) >= Date(2024, 1, 16)
        assert sorted([Date(2024, 3, 1), Date(2023, 3, 1)]) == [
            Date(2023, 3, 1),
            Date(2024, 3, 1),
        ]

    def test_equality_across_constructors(self) -> None:
        """Equal days compare equal however they were built."""
        assert Date(2005, 1, 1) == Date.from_week_date(2004, 53, 6)
        assert Date(2005, 1, 1) != Date(2005, 1, 2)
        assert Date(2005, 1, 1) != "2005-01-01"

    def test_hash(self) -> None:
        """Equal dates hash equally."""
        assert len({Date(2005, 1, 1), Date.from_ordinal_date(2005, 1)}) == 1


class TestDateRepresentation:
    """Tests for repr and str."""

    def test_repr(self) -> None:
        """repr shows the calendar components."""
        assert repr(Date(2024, 1, 15)) == "Date(2024, 1, 15)"

    def test_str(self) -> None:
        """str gives dashed calendar notation."""
        assert str(Date(2024, 1, 15)) == "2024-01-15"
        assert str(Date(99999, 3, 1)) == "99999-03-01"

    def test_str_negative_year(self) -> None:
        """Negative years get a leading minus."""
        assert Date(-44, 3, 15).to_iso_format() == "-0044-03-15"

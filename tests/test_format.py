"""Tests for date and duration formatting."""

from __future__ import annotations

import pytest

from isocalc import Date, Duration
from isocalc.errors import IsocalcError, ValidationError, YearOverflowError
from isocalc.format import Notation, format_date, format_duration, parse_date


class TestFormatDate:
    """Tests for format_date in each notation."""

    @pytest.mark.parametrize(
        ("notation", "dashed", "expected"),
        [
            (Notation.CALENDAR, True, "2005-01-01"),
            (Notation.CALENDAR, False, "20050101"),
            (Notation.WEEK, True, "2004-W53-6"),
            (Notation.WEEK, False, "2004W536"),
            (Notation.ORDINAL, True, "2005-001"),
            (Notation.ORDINAL, False, "2005001"),
        ],
    )
    def test_notations(self, notation: Notation, dashed: bool, expected: str) -> None:
        """One day rendered six ways."""
        assert format_date(Date(2005, 1, 1), notation, dashed=dashed) == expected

    def test_default_is_dashed_calendar(self) -> None:
        """The default is YYYY-MM-DD."""
        assert format_date(Date(2019, 2, 28)) == "2019-02-28"

    def test_string_notation(self) -> None:
        """Notation may be given by its value."""
        assert format_date(Date(1981, 12, 31), "week") == "1981-W53-4"
        assert format_date(Date(2024, 12, 31), "ordinal") == "2024-366"

    def test_unknown_notation(self) -> None:
        """An unknown notation name raises ValidationError."""
        with pytest.raises(ValidationError, match="unknown notation 'julian'"):
            format_date(Date(2024, 1, 1), "julian")

    def test_unknown_notation_is_isocalc_error(self) -> None:
        """The error belongs to the IsocalcError hierarchy."""
        with pytest.raises(IsocalcError):
            format_date(Date(2024, 1, 1), "WEEK")

    def test_zero_padding(self) -> None:
        """Small years, weeks and days are zero-padded."""
        d = Date(7, 1, 9)
        assert format_date(d) == "0007-01-09"
        assert format_date(d, Notation.ORDINAL, dashed=False) == "0007009"
        assert format_date(Date(0, 1, 5), Notation.WEEK) == "0000-W01-3"

    def test_round_trip_through_parser(self) -> None:
        """Formatting then parsing returns the same day for every notation."""
        for days in range(-670_000, 2_970_000, 7_919):
            d = Date.from_day_count(days)
            for notation in Notation:
                for dashed in (True, False):
                    assert parse_date(format_date(d, notation, dashed=dashed)) == d


class TestYearOverflow:
    """Tests for year overflow detection."""

    def test_long_year_dashed(self) -> None:
        """A five-digit year renders in dashed mode."""
        assert format_date(Date(99999, 6, 15)) == "99999-06-15"

    def test_long_year_undashed(self) -> None:
        """A five-digit year cannot be rendered undashed."""
        with pytest.raises(YearOverflowError) as info:
            format_date(Date(99999, 6, 15), dashed=False)
        assert info.value.year == "99999"

    def test_negative_year_dashed(self) -> None:
        """Negative years are rejected in dashed mode."""
        with pytest.raises(YearOverflowError) as info:
            format_date(Date(-1, 6, 15))
        assert info.value.year == "-001"

    def test_negative_year_undashed(self) -> None:
        """Negative years are rejected in undashed mode."""
        with pytest.raises(YearOverflowError):
            format_date(Date(-44, 3, 15), Notation.ORDINAL, dashed=False)

    def test_week_year_checked(self) -> None:
        """Week notation checks the week-year, not the calendar year."""
        # 10000-01-01 is a Saturday in week 52 of week-year 9999
        assert format_date(Date(10000, 1, 1), Notation.WEEK, dashed=False) == "9999W526"
        with pytest.raises(YearOverflowError):
            format_date(Date(10000, 1, 1), dashed=False)

    def test_week_year_before_zero(self) -> None:
        """0000-01-01 can belong to week-year -1."""
        d = Date(0, 1, 1)
        assert d.week_year == -1
        with pytest.raises(YearOverflowError):
            format_date(d, Notation.WEEK)
        assert format_date(d) == "0000-01-01"

    def test_year_9999_undashed(self) -> None:
        """The largest four-digit year is fine undashed."""
        assert format_date(Date(9999, 12, 31), dashed=False) == "99991231"


class TestFormatDuration:
    """Tests for format_duration."""

    def test_units_only(self) -> None:
        """Present units in Y, M, W, D order."""
        assert format_duration(Duration(years=1, weeks=2)) == "1Y2W"

    def test_repeat(self) -> None:
        """A repeat other than one gets a P prefix."""
        assert format_duration(Duration(repeat=3, days=-1)) == "3P-1D"
        assert format_duration(Duration(repeat=0, days=1)) == "0P1D"

    def test_negative_sign(self) -> None:
        """A negative sign is shown as a leading minus."""
        assert format_duration(-Duration(repeat=2, months=1)) == "-2P1M"

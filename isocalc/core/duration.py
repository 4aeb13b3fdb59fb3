"""Duration class representing a signed calendar offset.

This module provides the Duration class: a combination of years, months,
weeks and days with a repeat factor and an overall sign, as produced by
the duration grammar (for example ``3P1Y-2M`` or ``+1W``).
"""

from __future__ import annotations

from isocalc.errors import ValidationError


class Duration:
    """A calendar duration with a repeat factor and an overall sign.

    Each unit is either absent (None) or a signed integer, and at least
    one unit must be present. The effective multiplier applied to every
    unit is ``sign * repeat``, so the repeat factor and the overall sign
    scale the whole duration uniformly.

    Units are applied to dates in the fixed order years, months, weeks,
    days; see isocalc.arithmetic.duration_ops.

    Attributes:
        repeat: Non-negative repeat factor (default 1).
        years: Years (or None when absent).
        months: Months (or None when absent).
        weeks: Weeks (or None when absent).
        days: Days (or None when absent).
        sign: Overall sign, +1 or -1.

    Examples:
        >>> d = Duration(years=1, months=-2)
        >>> d.factor
        1
        >>> (-d).factor
        -1

        >>> Duration(repeat=3, weeks=1).scaled_days
        21
    """

    __slots__ = ("_repeat", "_years", "_months", "_weeks", "_days", "_sign")

    def __init__(
        self,
        *,
        repeat: int = 1,
        years: int | None = None,
        months: int | None = None,
        weeks: int | None = None,
        days: int | None = None,
        sign: int = 1,
    ) -> None:
        """Create a Duration from component parts.

        Raises:
            ValidationError: If no unit is present, repeat is negative,
                or sign is not +1 or -1.
        """
        if years is None and months is None and weeks is None and days is None:
            raise ValidationError(
                "duration needs at least one of years, months, weeks or days"
            )
        if repeat < 0:
            raise ValidationError(f"repeat must be non-negative, got {repeat}")
        if sign not in (1, -1):
            raise ValidationError(f"sign must be 1 or -1, got {sign}")

        self._repeat = repeat
        self._years = years
        self._months = months
        self._weeks = weeks
        self._days = days
        self._sign = sign

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """Create a Duration of a given number of days."""
        return cls(days=days)

    @classmethod
    def from_iso_format(cls, s: str) -> Duration:
        """Parse a duration such as ``2P1Y-1M`` or ``+3D``.

        Raises:
            ParseError: If the text does not match the duration grammar.
        """
        from isocalc.format.duration import parse_duration

        return parse_duration(s)

    @property
    def repeat(self) -> int:
        return self._repeat

    @property
    def years(self) -> int | None:
        return self._years

    @property
    def months(self) -> int | None:
        return self._months

    @property
    def weeks(self) -> int | None:
        return self._weeks

    @property
    def days(self) -> int | None:
        return self._days

    @property
    def sign(self) -> int:
        return self._sign

    @property
    def factor(self) -> int:
        """Return the multiplier applied to every unit (sign * repeat)."""
        return self._sign * self._repeat

    @property
    def scaled_years(self) -> int:
        """Return the years to add after applying the factor."""
        return (self._years or 0) * self.factor

    @property
    def scaled_months(self) -> int:
        """Return the months to add after applying the factor."""
        return (self._months or 0) * self.factor

    @property
    def scaled_days(self) -> int:
        """Return the days to add (weeks included) after applying the factor.

        Examples:
            >>> Duration(weeks=2, days=-1).scaled_days
            13
        """
        return ((self._weeks or 0) * 7 + (self._days or 0)) * self.factor

    def with_sign(self, sign: int) -> Duration:
        """Return a copy with the overall sign multiplied by ``sign``.

        This is how a command-level ``+``/``-`` token is combined with the
        duration text.

        Examples:
            >>> Duration(days=3).with_sign(-1).factor
            -1
        """
        if sign not in (1, -1):
            raise ValidationError(f"sign must be 1 or -1, got {sign}")
        return Duration(
            repeat=self._repeat,
            years=self._years,
            months=self._months,
            weeks=self._weeks,
            days=self._days,
            sign=self._sign * sign,
        )

    def to_iso_format(self) -> str:
        """Return the duration in its textual grammar.

        Examples:
            >>> Duration(repeat=2, years=1, months=-1).to_iso_format()
            '2P1Y-1M'
        """
        from isocalc.format.duration import format_duration

        return format_duration(self)

    def _key(self) -> tuple:
        return (
            self._repeat,
            self._years,
            self._months,
            self._weeks,
            self._days,
            self._sign,
        )

    def __neg__(self) -> Duration:
        return self.with_sign(-1)

    def __pos__(self) -> Duration:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a string like 'Duration(repeat=1, months=1, sign=1)'."""
        parts = [f"repeat={self._repeat}"]
        for name in ("years", "months", "weeks", "days"):
            value = getattr(self, f"_{name}")
            if value is not None:
                parts.append(f"{name}={value}")
        parts.append(f"sign={self._sign}")
        return f"Duration({', '.join(parts)})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Duration"]

"""Month-of-year value type.

The twelve members are numbered 1 (January) to 12 (December). That number is
the only public numbering. Wrap-around arithmetic works on a zero-based
position that never leaves this module.
"""

from __future__ import annotations

import enum
from datetime import date, datetime

from calendar_months.core.settings import get_settings
from calendar_months.domain.chronology import (
    MONTH_OF_YEAR_RULE,
    YEAR_RULE,
    FieldRule,
    is_leap_year,
)
from calendar_months.domain.day_of_month import DayOfMonth
from calendar_months.domain.errors import MissingArgumentError
from calendar_months.domain.quarter_of_year import QuarterOfYear
from calendar_months.domain.resolvers import DateResolver, previous_valid, resolve_date
from calendar_months.domain.text_symbols import (
    DEFAULT_TEXT_SYMBOLS,
    TextStyle,
    TextSymbols,
)
from calendar_months.domain.year import SupportsLeap

MONTHS_PER_YEAR = 12


class MonthOfYear(enum.Enum):
    """A month of the ISO calendar year."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @staticmethod
    def rule() -> FieldRule:
        """Return the field rule bounding month numbers to 1..12."""
        return MONTH_OF_YEAR_RULE

    @classmethod
    def of(cls, value: int) -> MonthOfYear:
        """Return the month with the given 1-based number.

        Raises:
            IllegalFieldValueError: when value is outside 1..12.
        """
        return cls(MONTH_OF_YEAR_RULE.check_value(value))

    @classmethod
    def from_date(cls, value: date | None) -> MonthOfYear:
        """Return the month of a date."""
        if value is None:
            raise MissingArgumentError("date")
        return cls.of(value.month)

    def _position(self) -> int:
        return self.value - 1

    def _shifted(self, months: int) -> MonthOfYear:
        # Python's % is floored, so the position is always within 0..11.
        return type(self)((self._position() + months) % MONTHS_PER_YEAR + 1)

    def next(self) -> MonthOfYear:
        """Return the following month, December wrapping to January."""
        return self._shifted(1)

    def previous(self) -> MonthOfYear:
        """Return the preceding month, January wrapping to December."""
        return self._shifted(-1)

    def plus_months(self, months: int) -> MonthOfYear:
        """Return the month ``months`` later, wrapping in either direction."""
        return self._shifted(months)

    def minus_months(self, months: int) -> MonthOfYear:
        """Return the month ``months`` earlier, wrapping in either direction."""
        return self._shifted(-months)

    def _length(self, *, leap: bool) -> int:
        match self:
            case MonthOfYear.FEBRUARY:
                return 29 if leap else 28
            case (
                MonthOfYear.APRIL
                | MonthOfYear.JUNE
                | MonthOfYear.SEPTEMBER
                | MonthOfYear.NOVEMBER
            ):
                return 30
            case _:
                return 31

    def length_in_days(self, year: SupportsLeap | int | None) -> int:
        """Return the number of days in this month for a year.

        ``year`` is either an object exposing ``is_leap()`` or a raw ISO year
        number. Raw numbers are validated against the year bounds first.

        Raises:
            MissingArgumentError: when year is None.
            IllegalFieldValueError: when a raw year is out of bounds.
        """
        if year is None:
            raise MissingArgumentError("year")
        if isinstance(year, int):
            leap = is_leap_year(YEAR_RULE.check_value(year))
        else:
            leap = year.is_leap()
        return self._length(leap=leap)

    def min_length_in_days(self) -> int:
        return self._length(leap=False)

    def max_length_in_days(self) -> int:
        return self._length(leap=True)

    def last_day_of_month(self, year: SupportsLeap | int | None) -> DayOfMonth:
        """Return the last day of this month in the given year."""
        return DayOfMonth.of(self.length_in_days(year))

    def quarter_of_year(self) -> QuarterOfYear:
        """Return the quarter this month belongs to."""
        return QuarterOfYear(self._position() // 3 + 1)

    def month_of_quarter(self) -> int:
        """Return the 1-based position of this month within its quarter."""
        return self._position() % 3 + 1

    def adjust_date(
        self,
        value: date | None,
        resolver: DateResolver | None = None,
    ) -> date:
        """Return a copy of ``value`` with this month substituted.

        When the day-of-month does not exist in this month, ``resolver``
        decides the outcome. Without one, the day is clamped to the last
        valid day of the month. The time and timezone of a ``datetime``
        are kept.

        Raises:
            MissingArgumentError: when value is None.
            InvalidCalendarFieldError: when the resolver cannot produce a date.
        """
        if value is None:
            raise MissingArgumentError("date")
        if value.month == self.value:
            return value

        resolved = resolve_date(
            resolver or previous_valid,
            value.year,
            self.value,
            value.day,
        )
        if isinstance(value, datetime):
            return datetime.combine(resolved, value.timetz())
        return resolved

    def matches_date(self, value: date | None) -> bool:
        """Return whether the date falls in this month.

        Raises:
            MissingArgumentError: when value is None.
        """
        if value is None:
            raise MissingArgumentError("date")
        return value.month == self.value

    def short_text(
        self,
        locale: str | None = None,
        symbols: TextSymbols | None = None,
    ) -> str:
        """Return the abbreviated month name, e.g. ``Jan``."""
        return self._text(TextStyle.SHORT, locale, symbols)

    def text(
        self,
        locale: str | None = None,
        symbols: TextSymbols | None = None,
    ) -> str:
        """Return the full month name, e.g. ``January``."""
        return self._text(TextStyle.FULL, locale, symbols)

    def _text(
        self,
        style: TextStyle,
        locale: str | None,
        symbols: TextSymbols | None,
    ) -> str:
        lookup = symbols or DEFAULT_TEXT_SYMBOLS
        text = lookup.field_value_text(
            MONTH_OF_YEAR_RULE,
            style,
            self.value,
            locale or get_settings().locale,
        )
        return str(self.value) if text is None else text

    def __str__(self) -> str:
        return f"MonthOfYear={self.name}"

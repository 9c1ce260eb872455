"""ISO calendar field rules shared by the calendar value types."""

from __future__ import annotations

from dataclasses import dataclass

from calendar_months.domain.errors import IllegalFieldValueError

MIN_YEAR = -999_999_999
MAX_YEAR = 999_999_999


def is_leap_year(year: int) -> bool:
    """Return whether a year is leap in the proleptic Gregorian calendar."""

    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Name and inclusive bounds of a calendar field."""

    name: str
    minimum: int
    maximum: int

    def is_valid_value(self, value: int) -> bool:
        if isinstance(value, bool):
            return False
        return self.minimum <= value <= self.maximum

    def check_value(self, value: int) -> int:
        """Return value unchanged or raise when it is out of bounds."""

        if not self.is_valid_value(value):
            raise IllegalFieldValueError(
                field_name=self.name,
                value=value,
                minimum=self.minimum,
                maximum=self.maximum,
            )
        return value


YEAR_RULE = FieldRule(name="year", minimum=MIN_YEAR, maximum=MAX_YEAR)
QUARTER_OF_YEAR_RULE = FieldRule(name="quarter_of_year", minimum=1, maximum=4)
MONTH_OF_YEAR_RULE = FieldRule(name="month_of_year", minimum=1, maximum=12)
DAY_OF_MONTH_RULE = FieldRule(name="day_of_month", minimum=1, maximum=31)

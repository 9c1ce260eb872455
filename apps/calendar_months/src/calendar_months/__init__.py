"""Month-of-year value type with ISO calendar arithmetic."""

from calendar_months.domain.day_of_month import DayOfMonth
from calendar_months.domain.errors import (
    CalendarError,
    IllegalFieldValueError,
    InvalidCalendarFieldError,
    MissingArgumentError,
)
from calendar_months.domain.month_of_year import MonthOfYear
from calendar_months.domain.quarter_of_year import QuarterOfYear
from calendar_months.domain.year import Year

__all__ = [
    "CalendarError",
    "DayOfMonth",
    "IllegalFieldValueError",
    "InvalidCalendarFieldError",
    "MissingArgumentError",
    "MonthOfYear",
    "QuarterOfYear",
    "Year",
]

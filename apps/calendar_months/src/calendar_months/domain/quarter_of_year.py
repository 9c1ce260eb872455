"""Quarters of the ISO year."""

from __future__ import annotations

import enum

from calendar_months.domain.chronology import QUARTER_OF_YEAR_RULE


class QuarterOfYear(enum.Enum):
    """Three-month groupings of the calendar year."""

    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4

    @classmethod
    def of(cls, value: int) -> QuarterOfYear:
        """Return the quarter numbered 1 to 4."""
        return cls(QUARTER_OF_YEAR_RULE.check_value(value))

    def next(self) -> QuarterOfYear:
        return type(self)(self.value % 4 + 1)

    def previous(self) -> QuarterOfYear:
        return type(self)((self.value - 2) % 4 + 1)

    def __str__(self) -> str:
        return f"QuarterOfYear={self.name}"

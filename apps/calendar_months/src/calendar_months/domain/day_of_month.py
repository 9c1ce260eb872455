"""Day-of-month value object."""

from __future__ import annotations

from dataclasses import dataclass

from calendar_months.domain.chronology import DAY_OF_MONTH_RULE


@dataclass(frozen=True, slots=True)
class DayOfMonth:
    """Represents a day within a month, from 1 to 31."""

    value: int

    def __post_init__(self) -> None:
        DAY_OF_MONTH_RULE.check_value(self.value)

    @classmethod
    def of(cls, value: int) -> DayOfMonth:
        return cls(value=value)

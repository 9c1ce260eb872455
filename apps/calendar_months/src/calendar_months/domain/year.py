"""Year value object used for leap-aware month lengths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from calendar_months.domain.chronology import YEAR_RULE, is_leap_year


class SupportsLeap(Protocol):
    """Anything that can report whether it is a leap year."""

    def is_leap(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class Year:
    """Represents an ISO proleptic year."""

    value: int

    def __post_init__(self) -> None:
        YEAR_RULE.check_value(self.value)

    @classmethod
    def of(cls, value: int) -> Year:
        return cls(value=value)

    def is_leap(self) -> bool:
        """Return whether this year has 366 days."""
        return is_leap_year(self.value)

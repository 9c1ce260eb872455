"""Serializable projections of calendar values."""

from __future__ import annotations

from pydantic import BaseModel, Field

from calendar_months.domain.month_of_year import MonthOfYear


class MonthSummary(BaseModel):
    """Month attributes rendered for a locale."""

    value: int = Field(ge=1, le=12)
    name: str
    text: str
    short_text: str
    quarter_of_year: int = Field(ge=1, le=4)
    month_of_quarter: int = Field(ge=1, le=3)
    min_length_in_days: int = Field(ge=28, le=31)
    max_length_in_days: int = Field(ge=29, le=31)

    @classmethod
    def from_month(
        cls,
        month: MonthOfYear,
        *,
        locale: str | None = None,
    ) -> MonthSummary:
        return cls(
            value=month.value,
            name=month.name,
            text=month.text(locale),
            short_text=month.short_text(locale),
            quarter_of_year=month.quarter_of_year().value,
            month_of_quarter=month.month_of_quarter(),
            min_length_in_days=month.min_length_in_days(),
            max_length_in_days=month.max_length_in_days(),
        )

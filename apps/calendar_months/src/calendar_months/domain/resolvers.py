"""Strategies that reconcile an invalid day-of-month after a field change.

A resolver receives the candidate year, month and day and returns a valid
``datetime.date``. The default used by month adjustment is ``previous_valid``,
which clamps the day to the last day of the target month.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from typing import Protocol

from calendar_months.domain.errors import InvalidCalendarFieldError

logger = logging.getLogger(__name__)


class DateResolver(Protocol):
    """Callable resolving a possibly invalid year-month-day combination."""

    def __call__(self, year: int, month: int, day: int) -> date: ...


def _days_in_month(year: int, month: int) -> int:
    _, month_last_day = calendar.monthrange(year, month)
    return month_last_day


def strict(year: int, month: int, day: int) -> date:
    """Reject any day that does not exist in the target month."""

    if day > _days_in_month(year, month):
        raise InvalidCalendarFieldError(year=year, month=month, day=day)
    return date(year=year, month=month, day=day)


def previous_valid(year: int, month: int, day: int) -> date:
    """Clamp the day to the last valid day of the target month."""

    month_last_day = _days_in_month(year, month)
    if day > month_last_day:
        logger.debug(
            "day_of_month_clamped",
            extra={
                "year": year,
                "month": month,
                "day": day,
                "resolved_day": month_last_day,
            },
        )
        day = month_last_day
    return date(year=year, month=month, day=day)


def next_valid(year: int, month: int, day: int) -> date:
    """Move an invalid day to the first day of the following month."""

    month_last_day = _days_in_month(year, month)
    if day <= month_last_day:
        return date(year=year, month=month, day=day)
    logger.debug(
        "day_of_month_rolled_forward",
        extra={"year": year, "month": month, "day": day},
    )
    return date(year=year, month=month, day=month_last_day) + timedelta(days=1)


def part_lenient(year: int, month: int, day: int) -> date:
    """Let days beyond the month end overflow into the following month."""

    month_last_day = _days_in_month(year, month)
    if day <= month_last_day:
        return date(year=year, month=month, day=day)
    overflow = day - month_last_day
    logger.debug(
        "day_of_month_overflowed",
        extra={"year": year, "month": month, "day": day, "overflow": overflow},
    )
    return date(year=year, month=month, day=month_last_day) + timedelta(days=overflow)


RESOLVERS: dict[str, DateResolver] = {
    "strict": strict,
    "previous-valid": previous_valid,
    "next-valid": next_valid,
    "part-lenient": part_lenient,
}


def get_resolver(name: str) -> DateResolver:
    """Return the resolver registered under a kebab-case name."""

    try:
        return RESOLVERS[name.strip().lower()]
    except KeyError:
        msg = f"Unknown date resolver '{name}'. Valid names: {sorted(RESOLVERS)}"
        raise ValueError(msg) from None


def resolve_date(resolver: DateResolver, year: int, month: int, day: int) -> date:
    """Run a resolver and report any failure as an unresolvable combination."""

    try:
        resolved = resolver(year, month, day)
    except InvalidCalendarFieldError:
        raise
    except (ValueError, OverflowError) as exc:
        raise InvalidCalendarFieldError(year=year, month=month, day=day) from exc

    if not isinstance(resolved, date):
        raise InvalidCalendarFieldError(year=year, month=month, day=day)
    return resolved

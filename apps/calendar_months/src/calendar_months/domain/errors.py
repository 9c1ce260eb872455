"""Calendar exceptions raised by month, year and date adjustment helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class CalendarError(Exception):
    """Base exception for predictable calendar failures."""

    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class IllegalFieldValueError(CalendarError):
    """Raised when a field value falls outside its valid bounds."""

    def __init__(
        self,
        *,
        field_name: str,
        value: Any,
        minimum: int,
        maximum: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code="ILLEGAL_FIELD_VALUE",
            message=message
            or compose_error_message(
                cause=(
                    f"Value {value} for {field_name} is outside the valid "
                    f"range [{minimum}, {maximum}]."
                ),
                action=f"Use a {field_name} value from {minimum} to {maximum}.",
            ),
            details={
                "field": field_name,
                "value": value,
                "minimum": minimum,
                "maximum": maximum,
            },
        )

    @property
    def field_name(self) -> str:
        return self.details["field"]

    @property
    def value(self) -> Any:
        return self.details["value"]

    @property
    def minimum(self) -> int:
        return self.details["minimum"]

    @property
    def maximum(self) -> int:
        return self.details["maximum"]


class MissingArgumentError(CalendarError):
    """Raised when a required collaborator was not supplied."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        super().__init__(
            code="MISSING_ARGUMENT",
            message=message
            or compose_error_message(
                cause=f"The {argument} must not be None.",
                action=f"Pass a {argument} value and try again.",
            ),
            details={"argument": argument},
        )

    @property
    def argument(self) -> str:
        return self.details["argument"]


class InvalidCalendarFieldError(CalendarError):
    """Raised when a year, month and day combination cannot be resolved."""

    def __init__(
        self,
        *,
        year: int,
        month: int,
        day: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_CALENDAR_FIELDS",
            message=message
            or compose_error_message(
                cause=(
                    f"Date {year:04d}-{month:02d}-{day:02d} is not valid "
                    "and the resolver could not reconcile it."
                ),
                action="Use a different date resolver or a valid day-of-month.",
            ),
            details={"year": year, "month": month, "day": day},
        )

from calendar_months.domain.errors import (
    CalendarError,
    IllegalFieldValueError,
    MissingArgumentError,
    compose_error_message,
)


def test_compose_error_message() -> None:
    message = compose_error_message(cause="Bad.", action="Fix.")

    assert message == "Cause: Bad. Action: Fix."


def test_errors_share_calendar_base() -> None:
    error = IllegalFieldValueError(
        field_name="month_of_year",
        value=0,
        minimum=1,
        maximum=12,
    )

    assert isinstance(error, CalendarError)
    assert str(error) == error.message
    assert error.message.startswith("Cause: Value 0 for month_of_year")


def test_custom_message_is_kept() -> None:
    error = MissingArgumentError("year", message="Year is required")

    assert str(error) == "Year is required"
    assert error.code == "MISSING_ARGUMENT"

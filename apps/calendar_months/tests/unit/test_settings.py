import pytest
from pydantic import ValidationError

from calendar_months.core.settings import CalendarSettings, get_settings
from calendar_months.domain.month_of_year import MonthOfYear


def test_defaults() -> None:
    settings = get_settings()

    assert settings.locale == "en"
    assert settings.default_resolver == "previous-valid"
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CALENDAR_LOCALE", "pt_BR")
    monkeypatch.setenv("CALENDAR_DEFAULT_RESOLVER", "Next-Valid")
    monkeypatch.setenv("CALENDAR_LOG_LEVEL", "debug")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.default_resolver == "next-valid"
    assert settings.log_level == "DEBUG"
    assert MonthOfYear.MAY.text() == "maio"


def test_unknown_default_resolver_does_not_break_month_text(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CALENDAR_DEFAULT_RESOLVER", "Closest")

    assert get_settings().default_resolver == "closest"
    assert MonthOfYear.JANUARY.text() == "January"
    assert MonthOfYear.JANUARY.short_text() == "Jan"


@pytest.mark.parametrize("level", ["loud", "", "verbose"])
def test_unknown_log_level_is_rejected(
    monkeypatch: pytest.MonkeyPatch,
    level: str,
) -> None:
    monkeypatch.setenv("CALENDAR_LOG_LEVEL", level)

    with pytest.raises(ValidationError, match="log_level must be one of"):
        CalendarSettings()

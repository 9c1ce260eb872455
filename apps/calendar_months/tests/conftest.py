from __future__ import annotations

from collections.abc import Generator

import pytest

from calendar_months.core.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    for name in ("CALENDAR_LOCALE", "CALENDAR_DEFAULT_RESOLVER", "CALENDAR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

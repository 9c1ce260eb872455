"""Locale text lookup for calendar field values."""

from __future__ import annotations

import enum
from typing import Protocol

from calendar_months.domain.chronology import MONTH_OF_YEAR_RULE, FieldRule


class TextStyle(enum.StrEnum):
    SHORT = "short"
    FULL = "full"


class TextSymbols(Protocol):
    """Lookup of localized text keyed by field, style and numeric value."""

    def field_value_text(
        self,
        field: FieldRule,
        style: TextStyle,
        value: int,
        locale: str,
    ) -> str | None: ...


_MONTH_NAMES: dict[str, dict[TextStyle, tuple[str, ...]]] = {
    "en": {
        TextStyle.FULL: (
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ),
        TextStyle.SHORT: (
            "Jan",
            "Feb",
            "Mar",
            "Apr",
            "May",
            "Jun",
            "Jul",
            "Aug",
            "Sep",
            "Oct",
            "Nov",
            "Dec",
        ),
    },
    "pt": {
        TextStyle.FULL: (
            "janeiro",
            "fevereiro",
            "março",
            "abril",
            "maio",
            "junho",
            "julho",
            "agosto",
            "setembro",
            "outubro",
            "novembro",
            "dezembro",
        ),
        TextStyle.SHORT: (
            "jan",
            "fev",
            "mar",
            "abr",
            "mai",
            "jun",
            "jul",
            "ago",
            "set",
            "out",
            "nov",
            "dez",
        ),
    },
}


def normalize_locale(locale: str) -> str:
    """Return locale tag with underscore separator, e.g. ``pt-BR`` -> ``pt_BR``."""

    return locale.strip().replace("-", "_")


class LocaleTextSymbols:
    """Built-in month names, falling back from ``pt_BR`` to ``pt``."""

    def __init__(
        self,
        month_names: dict[str, dict[TextStyle, tuple[str, ...]]] | None = None,
    ) -> None:
        self._month_names = month_names if month_names is not None else _MONTH_NAMES

    def field_value_text(
        self,
        field: FieldRule,
        style: TextStyle,
        value: int,
        locale: str,
    ) -> str | None:
        if field != MONTH_OF_YEAR_RULE or not field.is_valid_value(value):
            return None

        names = self._names_for(normalize_locale(locale))
        if names is None or style not in names:
            return None
        return names[style][value - 1]

    def _names_for(self, locale: str) -> dict[TextStyle, tuple[str, ...]] | None:
        if locale in self._month_names:
            return self._month_names[locale]
        language = locale.split("_", 1)[0]
        return self._month_names.get(language)


DEFAULT_TEXT_SYMBOLS = LocaleTextSymbols()

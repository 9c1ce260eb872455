"""Application settings loaded from environment variables."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalendarSettings(BaseSettings):
    """Runtime settings for month text and date adjustment defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locale: str = Field(default="en", alias="CALENDAR_LOCALE")
    default_resolver: str = Field(
        default="previous-valid",
        alias="CALENDAR_DEFAULT_RESOLVER",
    )
    log_level: str = Field(default="WARNING", alias="CALENDAR_LOG_LEVEL")

    @field_validator("default_resolver")
    @classmethod
    def normalize_default_resolver(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        level_names = logging.getLevelNamesMapping()
        if normalized not in level_names:
            msg = f"log_level must be one of {sorted(level_names)}"
            raise ValueError(msg)
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> CalendarSettings:
    """Return cached settings instance for the current process."""

    return CalendarSettings()

"""
Application configuration helpers.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from environment variables."""

    database_url: str = Field("sqlite:///court_data.db", alias="DATABASE_URL")
    case_provider: Literal["simulated", "live"] = Field("simulated", alias="CASE_PROVIDER")
    court_state: str = Field("default", alias="COURT_STATE")
    request_timeout: float = Field(30.0, alias="REQUEST_TIMEOUT")
    request_delay: float = Field(1.0, alias="REQUEST_DELAY")
    batch_delay: float = Field(2.0, alias="BATCH_DELAY")
    min_year: int = Field(1950, alias="MIN_YEAR")
    max_year: int = Field(2025, alias="MAX_YEAR")
    history_default_limit: int = Field(10, alias="HISTORY_DEFAULT_LIMIT")
    history_max_limit: int = Field(100, alias="HISTORY_MAX_LIMIT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()

"""
Environment configuration — single source of truth for all settings.

Uses pydantic-settings for type-safe config with .env file support.
All values have sensible defaults, so the client works with no setup.

Usage:
    from dwd_alerts.core.config import settings
    print(settings.DWD_WARNINGS_URL)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_WARNINGS_URL = "https://www.dwd.de/DWD/warnungen/warnapp/json/warnings.json"


class Settings(BaseSettings):
    """
    Process-wide settings loaded from environment variables or .env file.

    Precedence: env var > .env file > default value
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ── Application ──
    APP_NAME: str = "DWD Weather Alerts"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"  # development | staging | production
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"  # DEBUG | INFO | WARNING | ERROR | CRITICAL

    # ── Upstream ──
    DWD_WARNINGS_URL: str = DEFAULT_WARNINGS_URL
    FETCH_TIMEOUT: float = 30.0  # seconds
    USER_AGENT: str = "dwd-alerts/0.1.0"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()

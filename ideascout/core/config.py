"""
Application configuration.
Search credentials are optional at startup; each request checks them before
issuing any query so the service can boot and report a clear error.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Constants
GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
SEARCH_TIMEOUT_SECONDS = 15.0
DEFAULT_TIME_RANGE = "6 months"
DEFAULT_MAX_RESULTS = 10
MAX_RESULTS_CAP = 10  # Custom Search returns at most 10 items per call
MAX_SITE_FILTERS = 3


class Settings(BaseSettings):
    """Application settings loaded from the environment and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Google Custom Search Configuration
    GOOGLE_SEARCH_API_KEY: str | None = None
    GOOGLE_SEARCH_CX: str | None = None
    SEARCH_TIMEOUT_SECONDS: float = SEARCH_TIMEOUT_SECONDS

    # OPTIONAL: Application Settings
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "production"
    CORS_ORIGINS: list[str] = []

    @field_validator("GOOGLE_SEARCH_API_KEY", "GOOGLE_SEARCH_CX")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat empty strings the same as unset values."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v!r}")
        return level

    def log_startup_summary(self) -> None:
        """Log configuration summary on startup (without leaking secrets)."""
        logger.info("=" * 60)
        logger.info("Idea Scout - Configuration")
        logger.info("=" * 60)
        logger.info("Environment: %s", self.ENVIRONMENT)
        logger.info("Log Level: %s", self.LOG_LEVEL)
        logger.info("Google Search API Key: %s", "✓ Present" if self.GOOGLE_SEARCH_API_KEY else "✗ Missing")
        logger.info("Google Search CX: %s", "✓ Present" if self.GOOGLE_SEARCH_CX else "✗ Missing")
        logger.info("Search Timeout: %.1fs", self.SEARCH_TIMEOUT_SECONDS)
        logger.info("=" * 60)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.log_startup_summary()
    return settings

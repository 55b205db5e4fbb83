"""Application configuration."""
import re
from functools import lru_cache

import pytz
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_env: str = "development"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./sas_transport.db"

    # Marketplace rules
    timezone: str = "Asia/Riyadh"
    receiver_phone_pattern: str = r"^05\d{8}$"
    permissive_numeric_input: bool = False

    # Pagination
    default_page_size: int = 50
    max_page_size: int = 200

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.app_env == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.app_env == "testing"

    def validate_required_settings(self) -> list[str]:
        """
        Validate that all required settings are configured.

        Returns:
            List of missing or invalid settings
        """
        errors = []

        if not self.database_url:
            errors.append("DATABASE_URL is required")

        if self.timezone not in pytz.all_timezones_set:
            errors.append(f"TIMEZONE '{self.timezone}' is not a known timezone")

        try:
            re.compile(self.receiver_phone_pattern)
        except re.error as e:
            errors.append(f"RECEIVER_PHONE_PATTERN is not a valid regex: {e}")

        if self.default_page_size <= 0:
            errors.append("DEFAULT_PAGE_SIZE must be positive")

        if self.max_page_size < self.default_page_size:
            errors.append("MAX_PAGE_SIZE must not be smaller than DEFAULT_PAGE_SIZE")

        return errors


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

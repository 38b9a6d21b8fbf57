"""Application configuration using Pydantic settings."""

from datetime import datetime, timezone
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


def utc_now() -> datetime:
    """Current time in UTC, used to stamp parse results."""
    return datetime.now(timezone.utc)


class Settings(BaseSettings):
    """Parser settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DRFCHART_",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Header inference
    default_country_code: str = "USA"
    inferred_track_name_from_code: bool = True

    # How much of an offending line is kept on a warning
    raw_excerpt_length: int = 100

    def model_post_init(self, __context) -> None:
        """Normalise values that come straight from the environment."""
        object.__setattr__(self, "log_level", self.log_level.upper())
        if self.raw_excerpt_length < 0:
            object.__setattr__(self, "raw_excerpt_length", 0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Application settings using Pydantic.

Provides environment-based configuration loading with SLIRULES_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # SLO compliance period used when a spec does not set one
    default_time_window: str = "30d"

    # Skip the total-window rule when a burn-rate window already covers it
    dedupe_total_window: bool = False

    # Rule file output
    rule_group_interval: str = "30s"
    output_dir: str = "generated/recording-rules"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "SLIRULES_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Configuration management for thai-slug."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library and CLI defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="THAI_SLUG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Slug defaults
    default_strategy: str = Field(
        default="phonetic", description="Strategy used when none is given"
    )
    separator: str = Field(default="-", description="Default slug separator")
    max_length: int | None = Field(
        default=None, gt=0, description="Default maximum slug length (unbounded if unset)"
    )
    lowercase: bool = Field(default=True, description="Lowercase generated slugs")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: str = Field(default="text", description="Log format (json or text)")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

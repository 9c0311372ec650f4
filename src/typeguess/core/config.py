"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: TYPEGUESS_
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEGUESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Guessing defaults
    default_culture: str = Field(
        default="invariant",
        description="Name of the culture preset used when a guesser is created without one",
    )
    char_can_be_boolean: bool = Field(
        default=False,
        description="Treat single letters such as Y/N or T/F as booleans",
    )
    extra_length_per_non_ascii_character: int = Field(
        default=0,
        ge=0,
        description="Extra width added per non-ASCII character (e.g. Oracle byte semantics)",
    )

    # Pooling
    pool_max_retained: int | None = Field(
        default=None,
        description="Maximum idle guessers kept by a pool (None = 2 * CPU count)",
    )

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

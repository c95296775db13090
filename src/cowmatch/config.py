"""
Configuration management for the CoW Matcher.

Supports configuration via environment variables and .env files.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatcherConfig(BaseSettings):
    """
    Configuration settings for the CoW Matcher.

    All settings can be configured via environment variables with the COWMATCH_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="COWMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Matching parameters
    match_fee_tier: bool = Field(
        default=False,
        description="Require equal fee tiers for two intents to be compatible"
    )
    batch_size_warning: int = Field(
        default=1000,
        ge=2,
        description="Batch size above which a warning is logged (resolution is quadratic)"
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


# Global config instance
_config: Optional[MatcherConfig] = None


def get_config() -> MatcherConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = MatcherConfig()
    return _config


def set_config(config: Optional[MatcherConfig]) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config

"""Configuration loading for the event space booking tracker.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Description helper configuration
    description_backend: Literal["gemini", "openai", "disabled"] = Field(
        default="disabled",
        description="Text generation backend for venue descriptions",
    )
    gemini_api_key: str = Field(
        default="",
        description="Gemini API key for description generation",
    )
    gemini_model: str = Field(
        default="gemini-2.5-flash",
        description="Gemini model to use for description generation",
    )
    gemini_api_url: str = Field(
        default="https://generativelanguage.googleapis.com",
        description="Gemini Generative Language API base URL",
    )
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key for description generation",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model to use for description generation",
    )
    description_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for a single description request in seconds",
    )

    # Venue defaults
    seed_sample_venues: bool = Field(
        default=True,
        description="Start with the built-in sample venues",
    )
    default_capacity: int = Field(
        default=10,
        description="Capacity pre-filled on a new venue form",
    )
    default_price_per_day: float = Field(
        default=100.0,
        description="Price per day pre-filled on a new venue form",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("description_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Ensure request timeout is positive."""
        if v <= 0:
            raise ValueError("description_timeout_seconds must be positive")
        return v

    @field_validator("default_capacity")
    @classmethod
    def validate_default_capacity(cls, v: int) -> int:
        """Ensure default capacity is at least one guest."""
        if v < 1:
            raise ValueError("default_capacity must be at least 1")
        return v

    @field_validator("default_price_per_day")
    @classmethod
    def validate_default_price(cls, v: float) -> float:
        """Ensure default price is non-negative."""
        if v < 0:
            raise ValueError("default_price_per_day must be non-negative")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]

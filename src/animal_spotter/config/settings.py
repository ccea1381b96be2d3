"""
Configuration settings for Animal Spotter.

This module provides configuration management using Pydantic settings
with support for environment variables and .env files.
"""

from typing import Optional, Dict, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://lambdaanimalspotter.vapor.cloud/api"


class SpotterSettings(BaseSettings):
    """
    Main configuration settings for Animal Spotter.

    Settings are loaded from multiple sources in order of preference:
    1. Environment variables (prefixed with ANIMAL_SPOTTER_)
    2. .env file
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ANIMAL_SPOTTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Animal Spotter API"
    )

    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds (unset keeps the HTTP client default)",
        gt=0
    )

    # Credentials
    username: Optional[str] = Field(
        default=None,
        description="Username used to sign in"
    )

    password: Optional[str] = Field(
        default=None,
        description="Password used to sign in"
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) base URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL '{v}'. It must start with http:// or https://")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @property
    def is_configured(self) -> bool:
        """Check if credentials are available for signing in."""
        return self.username is not None and self.password is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary, excluding sensitive data."""
        data = self.model_dump()
        if data.get("password"):
            data["password"] = "***masked***"
        return data


def get_settings() -> SpotterSettings:
    """Get the current Animal Spotter settings."""
    return SpotterSettings()

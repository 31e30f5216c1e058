"""Application configuration management.

This module provides configuration management using Pydantic settings
with environment variable and ``.env`` file support.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden using environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = Field(default="Plant API Proxy", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment (development, staging, production)")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=5000, description="Port to bind to")
    workers: int = Field(default=1, description="Number of worker processes")
    reload: bool = Field(default=False, description="Enable auto-reload")

    # Trefle settings
    trefle_api_token: str = Field(..., description="Trefle API token injected into upstream calls")
    trefle_api_url: str = Field(
        default="https://trefle.io/api/v1",
        description="Trefle API base URL"
    )
    trefle_timeout: int = Field(default=30, description="Trefle request timeout in seconds")

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")
    log_file: Optional[str] = Field(default=None, description="Log file path")
    log_max_size: str = Field(default="10MB", description="Maximum log file size")
    log_backup_count: int = Field(default=5, description="Number of backup log files")

    # CORS settings, comma-separated
    cors_origins: str = Field(default="*", description="Allowed CORS origins")
    cors_allow_methods: str = Field(default="GET,OPTIONS", description="Allowed CORS methods")
    cors_allow_headers: str = Field(default="*", description="Allowed CORS headers")

    # Monitoring settings
    metrics_enabled: bool = Field(default=True, description="Enable Prometheus metrics")

    @field_validator("trefle_api_token")
    @classmethod
    def validate_token(cls, v):
        """Reject a blank token."""
        if not v or not v.strip():
            raise ValueError("Trefle API token must not be empty")
        return v.strip()

    @field_validator("trefle_api_url")
    @classmethod
    def validate_api_url(cls, v):
        """Strip trailing slash from the Trefle base URL."""
        return v.rstrip("/")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        allowed = ["development", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log format."""
        allowed = ["json", "text"]
        if v not in allowed:
            raise ValueError(f"Log format must be one of {allowed}")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return _split_csv(self.cors_origins)

    @property
    def cors_allow_methods_list(self) -> List[str]:
        """Get CORS methods as a list."""
        return _split_csv(self.cors_allow_methods)

    @property
    def cors_allow_headers_list(self) -> List[str]:
        """Get CORS headers as a list."""
        return _split_csv(self.cors_allow_headers)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.

    Raises:
        ConfigurationError: If the Trefle token is missing or settings are invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        if "trefle_api_token" in fields:
            raise ConfigurationError(
                "Missing TREFLE_API_TOKEN in environment variables.",
                cause=e,
            ) from e
        raise ConfigurationError(
            f"Invalid configuration: {', '.join(sorted(fields))}",
            details={"errors": e.errors()},
            cause=e,
        ) from e

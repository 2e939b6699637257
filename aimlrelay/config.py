"""
Application configuration management.

Following Sandi Metz principles:
- Single Responsibility: Configuration loading and validation
- Small class: < 100 lines
- Clear naming: Descriptive property names
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Application configuration with validation.

    Loads from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="AIMLRelay", description="Application name")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")

    # AI/ML API settings
    aimlapi_api_key: str = Field(default="", description="AI/ML API key")
    aimlapi_base_url: str = Field(
        default="https://api.aimlapi.com/v1", description="AI/ML API base URL"
    )
    http_proxy: str = Field(default="", description="Outbound HTTP proxy URL")

    # Provider settings
    model: str = Field(default="", description="Configured model (empty = default)")
    default_model: str = Field(default="openai/gpt-4o", description="Default model")
    site_name: str = Field(default="AIMLRelay", description="Site name sent upstream")
    site_url: str = Field(
        default="http://localhost:8000", description="Site URL sent upstream"
    )
    temperature: float = Field(default=1.0, ge=0.0, le=2.0, description="Temperature")
    top_p: float = Field(default=1.0, ge=0.0, le=1.0, description="Nucleus sampling")

    # Streaming settings
    dry_run_prefix: str = Field(default="$DryRun$", description="Dry-run sentinel")
    stream_timeout_seconds: Optional[float] = Field(
        default=None, gt=0, description="Deadline for a streamed answer"
    )

    @field_validator("dry_run_prefix")
    @classmethod
    def validate_dry_run_prefix(cls, v: str) -> str:
        """Validate dry-run sentinel is not empty."""
        if not v:
            raise ValueError("Dry-run prefix cannot be empty")
        return v

    @property
    def has_proxy(self) -> bool:
        """Check if an outbound proxy is configured."""
        return bool(self.http_proxy)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


# Global configuration instance
config = AppConfig()

"""
LLM provider configuration models.

Sandi Metz Principles:
- Small classes with clear purpose
- Immutable configuration data
- Clear naming conventions
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aimlrelay.config import AppConfig


class ProviderConfig(BaseModel):
    """Per-instance AI/ML API provider settings."""

    model_config = ConfigDict(frozen=True)

    model: str = Field(default="", description="Model identifier (empty = default)")
    api_key: str = Field(..., description="API key for the provider")
    site_name: str = Field(default="AIMLRelay", description="Site name")
    site_url: str = Field(default="", description="Site URL")
    temperature: float = Field(default=1.0, ge=0.0, le=2.0)
    top_p: float = Field(default=1.0, ge=0.0, le=1.0)
    base_url: str = Field(
        default="https://api.aimlapi.com/v1", description="API base URL"
    )
    http_proxy: str = Field(default="", description="Outbound HTTP proxy URL")

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        """Strip surrounding whitespace from model name."""
        return v.strip()

    @classmethod
    def from_settings(cls, settings: AppConfig) -> "ProviderConfig":
        """Create provider configuration from application settings."""
        return cls(
            model=settings.model,
            api_key=settings.aimlapi_api_key,
            site_name=settings.site_name,
            site_url=settings.site_url,
            temperature=settings.temperature,
            top_p=settings.top_p,
            base_url=settings.aimlapi_base_url,
            http_proxy=settings.http_proxy,
        )

    def default_headers(self) -> dict:
        """Headers identifying the calling site upstream."""
        return {"HTTP-Referer": self.site_url, "X-Title": self.site_name}

"""
API dependency injection.

Sandi Metz Principles:
- Single Responsibility: Dependency creation and injection
- Dependency Inversion: Create dependencies from abstractions
"""

from typing import Optional

from aimlrelay.config import AppConfig, config
from aimlrelay.llm.aimlapi_provider import AIMLAPIProvider
from aimlrelay.llm.provider import BaseModelProvider
from aimlrelay.models.provider import ProviderConfig
from aimlrelay.utils.logger import get_logger

logger = get_logger(__name__)

# Global instance for reuse
_provider: Optional[BaseModelProvider] = None


def create_provider(settings: AppConfig) -> AIMLAPIProvider:
    """
    Build a provider from application settings.

    Args:
        settings: Application settings

    Returns:
        AI/ML API provider instance
    """
    return AIMLAPIProvider(
        ProviderConfig.from_settings(settings),
        default_model=settings.default_model,
        dry_run_prefix=settings.dry_run_prefix,
    )


async def get_provider() -> BaseModelProvider:
    """
    Get model provider (singleton).

    Returns:
        Model provider instance
    """
    global _provider
    if _provider is None:
        _provider = create_provider(config)
        logger.info("Provider initialized", provider=_provider.get_name())
    return _provider


def get_stream_timeout() -> Optional[float]:
    """
    Get deadline for streamed answers.

    Returns:
        Timeout in seconds, or None for no deadline
    """
    return config.stream_timeout_seconds

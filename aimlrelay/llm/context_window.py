"""
LLM context window lookup.

Sandi Metz Principles:
- Single Responsibility: Know model token limits
- Small methods: Each method < 10 lines
- Clear naming: Self-documenting code
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from aimlrelay.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_WINDOW_SIZE = 4096

_WINDOWS = {
    # OpenAI
    "openai/gpt-4o": 128000,
    "gpt-4o": 128000,
    "gpt-4o-mini": 128000,
    "gpt-4-turbo": 128000,
    "gpt-4": 8192,
    "gpt-3.5-turbo": 16385,
    # Anthropic
    "claude-3-5-sonnet-20240620": 200000,
    "claude-3-haiku-20240307": 200000,
    # Google
    "google/gemini-2.5-pro": 1048576,
    "google/gemma-3-4b-it": 131072,
    # Meta
    "meta-llama/Meta-Llama-3.1-8B-Instruct-Turbo": 131072,
    "meta-llama/Llama-3-8b-chat-hf": 8192,
    # DeepSeek
    "deepseek-chat": 65536,
    "deepseek-reasoner": 65536,
}


@dataclass(frozen=True)
class ContextWindowConfig:
    """Configuration for context window limits."""

    windows: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType(dict(_WINDOWS))
    )
    default_window: int = DEFAULT_WINDOW_SIZE


class ContextWindowManager:
    """
    Look up LLM context window limits.

    Exact model names win; otherwise the longest known prefix is used, so
    dated variants ("gpt-4o-2024-05-13") share their family's window.
    """

    def __init__(self, config: ContextWindowConfig | None = None):
        """
        Initialize context window manager.

        Args:
            config: Context window configuration (creates default if None)
        """
        self._config = config or ContextWindowConfig()
        self._prefixes = sorted(self._config.windows, key=len, reverse=True)

    def get_window_size(self, model: str) -> int:
        """
        Get context window size for model.

        Args:
            model: Model name

        Returns:
            Context window size in tokens
        """
        windows = self._config.windows
        if model in windows:
            return windows[model]

        for model_key in self._prefixes:
            if model.startswith(model_key):
                return windows[model_key]

        logger.warning(
            "Unknown model, using default window",
            model=model,
            window_size=self._config.default_window,
        )
        return self._config.default_window

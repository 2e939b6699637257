"""
Token counter for AI/ML API models.

Sandi Metz Principles:
- Single Responsibility: Count tokens
- Small methods: Each method < 10 lines
- Open/Closed: Easy to add new models
"""

from functools import lru_cache

import tiktoken

from aimlrelay.exceptions import TokenCountError
from aimlrelay.utils.logger import get_logger

logger = get_logger(__name__)

# Encoding for models tiktoken does not know (Anthropic, Google, Meta, ...)
FALLBACK_ENCODING = "cl100k_base"


@lru_cache(maxsize=64)
def _load_encoding(model_name: str) -> tiktoken.Encoding:
    try:
        return tiktoken.encoding_for_model(model_name)
    except KeyError:
        return tiktoken.get_encoding(FALLBACK_ENCODING)


class TokenCounter:
    """
    Count tokens for AI/ML API models.

    Model identifiers may carry a vendor prefix ("openai/gpt-4o"); the
    prefix is ignored when choosing an encoding. Special-token text such as
    "<|endoftext|>" is counted as plain text.
    """

    def count(self, text: str, model: str) -> int:
        """
        Count tokens in text for given model.

        Args:
            text: Text to count tokens
            model: Model name

        Returns:
            Token count

        Raises:
            TokenCountError: If the text cannot be tokenized for the model
        """
        encoding = self._get_encoding(model)
        try:
            return len(encoding.encode(text, disallowed_special=()))
        except ValueError as e:
            logger.warning("Token count failed", model=model, error=str(e))
            raise TokenCountError(model, str(e)) from e

    def _get_encoding(self, model: str) -> tiktoken.Encoding:
        """
        Get encoding for model.

        Args:
            model: Model name

        Returns:
            tiktoken encoding

        Raises:
            TokenCountError: If no encoding can be loaded
        """
        try:
            return _load_encoding(self._strip_vendor(model))
        except Exception as e:
            logger.error("Encoding unavailable", model=model, error=str(e))
            raise TokenCountError(model, f"encoding unavailable: {e}") from e

    @staticmethod
    def _strip_vendor(model: str) -> str:
        """Drop a vendor prefix such as "openai/" or "google/"."""
        return model.rsplit("/", 1)[-1]

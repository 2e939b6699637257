"""
Models package for AIMLRelay.

Exports all model classes for easy imports throughout the application.
"""

# LLM models
from aimlrelay.models.llm import ChatMessage, ChatRequest, UsageResult

# Provider configuration models
from aimlrelay.models.provider import ProviderConfig

# Query models
from aimlrelay.models.query import AnswerRequest

__all__ = [
    "AnswerRequest",
    "ChatMessage",
    "ChatRequest",
    "ProviderConfig",
    "UsageResult",
]

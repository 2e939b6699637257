"""
Pytest configuration and fixtures.

Provides common fixtures for testing.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from aimlrelay.config import AppConfig
from aimlrelay.models.provider import ProviderConfig
from tests.mocks.llm_mocks import FakeTokenCounter, RecordingSink


@pytest.fixture
def test_config() -> AppConfig:
    """
    Create test configuration.

    Returns:
        Test configuration instance
    """
    return AppConfig(
        app_env="development",
        aimlapi_api_key="test-key",
        model="",
        temperature=0.7,
        top_p=0.9,
    )


@pytest.fixture
def provider_config() -> ProviderConfig:
    """
    Create provider configuration with an empty model.

    Returns:
        Provider configuration
    """
    return ProviderConfig(api_key="test-key", temperature=0.7, top_p=0.9)


@pytest.fixture
def token_counter() -> FakeTokenCounter:
    """Word-counting token counter."""
    return FakeTokenCounter()


@pytest.fixture
def sink() -> RecordingSink:
    """Recording event sink."""
    return RecordingSink()


@pytest.fixture
def mock_client():
    """
    Mock OpenAI-compatible async client.

    Returns:
        Client whose chat.completions.create is an AsyncMock
    """
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def sample_question() -> str:
    """
    Sample question for testing.

    Returns:
        Sample question text
    """
    return "What is Python?"

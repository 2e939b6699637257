"""Test LLM models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from aimlrelay.models.llm import SYSTEM_PROMPT, ChatRequest, UsageResult


class TestUsageResult:
    """Test usage record model."""

    def test_should_create_from_counts(self):
        usage = UsageResult.from_counts(10, 7)

        assert usage.prompt_token_count == 10
        assert usage.response_token_count == 7
        assert usage.total_token_count == 17
        assert usage.total_price == Decimal("0")
        assert usage.currency == "USD"

    def test_should_reject_inconsistent_total(self):
        """Test total must equal prompt plus response tokens."""
        with pytest.raises(ValidationError, match="total_token_count"):
            UsageResult(
                prompt_token_count=10, response_token_count=7, total_token_count=20
            )

    def test_should_reject_negative_counts(self):
        with pytest.raises(ValidationError):
            UsageResult.from_counts(-1, 0)

    def test_should_be_immutable(self):
        usage = UsageResult.from_counts(1, 1)

        with pytest.raises(ValidationError):
            usage.total_price = Decimal("1")

    def test_should_serialize_price_exactly(self):
        usage = UsageResult.from_counts(1, 1).model_copy(
            update={"total_price": Decimal("0.0000042")}
        )

        assert '"total_price":"0.0000042"' in usage.model_dump_json()


class TestChatRequest:
    """Test chat request model."""

    def test_should_build_for_question(self):
        request = ChatRequest.for_question("gpt-4o", "Hi?", 0.5, 0.8, 100)

        assert request.messages[0].role == "system"
        assert request.messages[0].content == SYSTEM_PROMPT
        assert request.messages[1].role == "user"
        assert request.messages[1].content == "Hi?"

    def test_should_render_params(self):
        params = ChatRequest.for_question("gpt-4o", "Hi?", 0.5, 0.8, 100).to_params()

        assert params == {
            "model": "gpt-4o",
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": "Hi?"},
            ],
            "temperature": 0.5,
            "top_p": 0.8,
            "max_tokens": 100,
        }
        assert "stream" not in params

    def test_should_reject_negative_max_tokens(self):
        with pytest.raises(ValidationError):
            ChatRequest.for_question("gpt-4o", "Hi?", 0.5, 0.8, -1)

    def test_should_reject_empty_model(self):
        with pytest.raises(ValidationError):
            ChatRequest.for_question("", "Hi?", 0.5, 0.8, 1)

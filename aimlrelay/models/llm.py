"""
LLM request and usage models.

Sandi Metz Principles:
- Small classes focused on LLM interaction
- Clear separation of request and usage accounting
- Immutable data structures
"""

from decimal import Decimal
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

SYSTEM_PROMPT = "You are a helpful assistant."
DEFAULT_CURRENCY = "USD"


class ChatMessage(BaseModel):
    """Single role-tagged chat message."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user"] = Field(..., description="Message role")
    content: str = Field(..., description="Message text")


class ChatRequest(BaseModel):
    """
    Bounded chat-completion request.

    Built per call by the request planner; streaming is requested by the
    transport, not by this value.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(..., min_length=1, description="Resolved model name")
    messages: List[ChatMessage] = Field(..., min_length=1)
    temperature: float = Field(..., ge=0.0, le=2.0)
    top_p: float = Field(..., ge=0.0, le=1.0)
    max_tokens: int = Field(..., ge=0, description="Remaining context budget")

    @classmethod
    def for_question(
        cls,
        model: str,
        question: str,
        temperature: float,
        top_p: float,
        max_tokens: int,
    ) -> "ChatRequest":
        """Build a request with the fixed system preamble and the question."""
        return cls(
            model=model,
            messages=[
                ChatMessage(role="system", content=SYSTEM_PROMPT),
                ChatMessage(role="user", content=question),
            ],
            temperature=temperature,
            top_p=top_p,
            max_tokens=max_tokens,
        )

    def to_params(self) -> Dict[str, Any]:
        """
        Render keyword arguments for the chat completions API.

        Returns:
            Dict of API parameters
        """
        return {
            "model": self.model,
            "messages": [message.model_dump() for message in self.messages],
            "temperature": self.temperature,
            "top_p": self.top_p,
            "max_tokens": self.max_tokens,
        }


class UsageResult(BaseModel):
    """Token usage and cost of one answered (or dry-run) question."""

    model_config = ConfigDict(frozen=True)

    prompt_token_count: int = Field(..., ge=0)
    response_token_count: int = Field(..., ge=0)
    total_token_count: int = Field(..., ge=0)
    total_price: Decimal = Field(default=Decimal("0"), ge=0)
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)

    @model_validator(mode="after")
    def validate_total(self) -> "UsageResult":
        """Validate total equals prompt plus response tokens."""
        expected = self.prompt_token_count + self.response_token_count
        if self.total_token_count != expected:
            raise ValueError(
                f"total_token_count must be {expected}, got {self.total_token_count}"
            )
        return self

    @classmethod
    def from_counts(cls, prompt_tokens: int, response_tokens: int) -> "UsageResult":
        """Create an unpriced usage record from token counts."""
        return cls(
            prompt_token_count=prompt_tokens,
            response_token_count=response_tokens,
            total_token_count=prompt_tokens + response_tokens,
        )

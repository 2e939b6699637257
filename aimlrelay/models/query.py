"""
Answer request validation model.

Sandi Metz Principles:
- Small classes focused on data validation
- Clear property names
"""

from typing import Optional

from pydantic import BaseModel, Field


class AnswerRequest(BaseModel):
    """Incoming question to be answered as a server-sent event stream."""

    question: str = Field(
        ...,
        min_length=1,
        description="User question",
        examples=["What is the capital of France?"],
    )

    model: Optional[str] = Field(
        None,
        description="Model override (defaults to provider model)",
        examples=["openai/gpt-4o", "deepseek-chat"],
    )

    def get_model(self) -> str:
        """Get model override, empty when not given."""
        return self.model or ""

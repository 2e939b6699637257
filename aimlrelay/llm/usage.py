"""
Default usage record builder.

Sandi Metz Principles:
- Single Responsibility: Turn question/answer text into token counts
- Dependency Injection: Token counter injected
"""

from aimlrelay.llm.token_counter import TokenCounter
from aimlrelay.models.llm import UsageResult


class UsageBuilder:
    """Build unpriced usage records from question and answer text."""

    def __init__(self, token_counter: TokenCounter | None = None):
        self._counter = token_counter or TokenCounter()

    def build(self, model: str, question: str, answer: str) -> UsageResult:
        """
        Count prompt and response tokens.

        Args:
            model: Resolved model name
            question: Question text sent as the prompt
            answer: Accumulated answer text (empty for dry runs)

        Returns:
            Usage record with zero price

        Raises:
            TokenCountError: If either text cannot be tokenized
        """
        prompt_tokens = self._counter.count(question, model)
        response_tokens = self._counter.count(answer, model) if answer else 0
        return UsageResult.from_counts(prompt_tokens, response_tokens)

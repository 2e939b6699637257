"""
Request planner for bounded chat requests.

Sandi Metz Principles:
- Single Responsibility: Decide whether a question fits and bound it
- Small methods: One planning step per method
- Dependency Injection: Counter, window table and usage builder injected
"""

from dataclasses import dataclass

from aimlrelay.exceptions import ExceedsContextError
from aimlrelay.llm.context_window import ContextWindowManager
from aimlrelay.llm.token_counter import TokenCounter
from aimlrelay.llm.usage import UsageBuilder
from aimlrelay.models.llm import ChatRequest, UsageResult
from aimlrelay.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MODEL = "openai/gpt-4o"
DRY_RUN_PREFIX = "$DryRun$"


@dataclass(frozen=True)
class RequestPlan:
    """Outcome of planning one question."""

    model: str
    prompt_token_count: int
    context_length: int
    request: ChatRequest | None = None
    dry_run_usage: UsageResult | None = None

    @property
    def is_dry_run(self) -> bool:
        """Check if the plan is a feasibility-only result."""
        return self.dry_run_usage is not None


class RequestPlanner:
    """
    Plan chat requests within a model's context window.

    A question starting with the dry-run prefix is only sized, never sent.
    """

    def __init__(
        self,
        token_counter: TokenCounter | None = None,
        context_windows: ContextWindowManager | None = None,
        usage_builder: UsageBuilder | None = None,
        default_model: str = DEFAULT_MODEL,
        dry_run_prefix: str = DRY_RUN_PREFIX,
    ):
        """
        Initialize request planner.

        Args:
            token_counter: Token counter (creates default if None)
            context_windows: Context window table (creates default if None)
            usage_builder: Usage builder (shares the token counter if None)
            default_model: Model used when none is configured
            dry_run_prefix: Sentinel that marks a dry-run question
        """
        self._counter = token_counter or TokenCounter()
        self._windows = context_windows or ContextWindowManager()
        self._usage_builder = usage_builder or UsageBuilder(self._counter)
        self._default_model = default_model
        self._dry_run_prefix = dry_run_prefix

    def resolve_model(self, model: str | None) -> str:
        """
        Get model name with default fallback.

        Args:
            model: Configured model name (may be empty)

        Returns:
            Model name to use
        """
        return model or self._default_model

    def is_dry_run(self, question: str) -> bool:
        """Check if the question only probes feasibility."""
        return question.startswith(self._dry_run_prefix)

    def plan(
        self,
        question: str,
        model: str | None,
        temperature: float,
        top_p: float,
    ) -> RequestPlan:
        """
        Plan a question for the given model.

        Args:
            question: Question text
            model: Configured model name (empty means default)
            temperature: Sampling temperature
            top_p: Nucleus sampling probability

        Returns:
            Plan holding either a live request or a dry-run usage record

        Raises:
            TokenCountError: If the question cannot be tokenized
            ExceedsContextError: If the prompt does not fit the context window
        """
        resolved = self.resolve_model(model)
        prompt_tokens = self._counter.count(question, resolved)
        context_length = self._windows.get_window_size(resolved)

        if self.is_dry_run(question):
            return self._plan_dry_run(resolved, question, context_length)

        max_tokens = context_length - prompt_tokens
        if max_tokens < 0:
            self._reject(resolved, prompt_tokens, context_length)

        logger.debug(
            "Planned live request",
            model=resolved,
            prompt_tokens=prompt_tokens,
            context_length=context_length,
            max_tokens=max_tokens,
        )
        request = ChatRequest.for_question(
            resolved, question, temperature, top_p, max_tokens
        )
        return RequestPlan(resolved, prompt_tokens, context_length, request=request)

    def _plan_dry_run(
        self, model: str, question: str, context_length: int
    ) -> RequestPlan:
        """
        Size a dry-run question without building a request.

        Args:
            model: Resolved model name
            question: Question text including the sentinel
            context_length: Model context window

        Returns:
            Plan carrying the prompt-only usage record

        Raises:
            ExceedsContextError: If the prompt fills the whole window
        """
        usage = self._usage_builder.build(model, question, "")
        if usage.total_token_count >= context_length:
            self._reject(model, usage.prompt_token_count, context_length)

        logger.debug(
            "Dry run fits context",
            model=model,
            prompt_tokens=usage.prompt_token_count,
            context_length=context_length,
        )
        return RequestPlan(
            model, usage.prompt_token_count, context_length, dry_run_usage=usage
        )

    def _reject(self, model: str, prompt_tokens: int, context_length: int) -> None:
        """Log and raise a context overflow."""
        logger.warning(
            "Context window exceeded",
            model=model,
            prompt_tokens=prompt_tokens,
            context_length=context_length,
        )
        raise ExceedsContextError(model, prompt_tokens, context_length)

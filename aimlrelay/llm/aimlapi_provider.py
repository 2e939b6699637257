"""
AI/ML API provider implementation.

Sandi Metz Principles:
- Single Responsibility: AI/ML API interaction
- Small methods: Plan, stream and account isolated
- Dependency Injection: Collaborators and client injected
"""

import asyncio
from contextlib import aclosing
from typing import AsyncIterator

import httpx
from openai import AsyncOpenAI, AsyncStream, OpenAIError
from openai.types.chat import ChatCompletionChunk

from aimlrelay.exceptions import ConfigurationError, StreamError, UnsupportedSinkError
from aimlrelay.llm.pricing import PRICING_DESCRIPTION, CostCalculator
from aimlrelay.llm.provider import BaseModelProvider
from aimlrelay.llm.request_planner import (
    DEFAULT_MODEL,
    DRY_RUN_PREFIX,
    RequestPlanner,
)
from aimlrelay.llm.sink import EventSink
from aimlrelay.llm.stream_relay import StreamRelay
from aimlrelay.llm.token_counter import TokenCounter
from aimlrelay.llm.usage import UsageBuilder
from aimlrelay.models.llm import ChatRequest, UsageResult
from aimlrelay.models.provider import ProviderConfig
from aimlrelay.utils.logger import (
    bind_call_context,
    clear_call_context,
    get_logger,
    log_llm_call,
)

logger = get_logger(__name__)


class AIMLAPIProvider(BaseModelProvider):
    """
    AI/ML API implementation of the streaming provider.

    Sizes the question, streams the answer to an event sink and prices the
    finished exchange.
    """

    def __init__(
        self,
        provider_config: ProviderConfig,
        token_counter: TokenCounter | None = None,
        planner: RequestPlanner | None = None,
        relay: StreamRelay | None = None,
        cost_calculator: CostCalculator | None = None,
        client: AsyncOpenAI | None = None,
        default_model: str = DEFAULT_MODEL,
        dry_run_prefix: str = DRY_RUN_PREFIX,
    ):
        """
        Initialize AI/ML API provider.

        Args:
            provider_config: Immutable provider settings
            token_counter: Token counter (creates default if None)
            planner: Request planner (creates default if None)
            relay: Stream relay (creates default if None)
            cost_calculator: Cost calculator (creates default if None)
            client: OpenAI-compatible async client (created lazily if None)
            default_model: Model used when none is configured
            dry_run_prefix: Sentinel that marks a dry-run question
        """
        self._config = provider_config
        counter = token_counter or TokenCounter()
        self._usage_builder = UsageBuilder(counter)
        self._planner = planner or RequestPlanner(
            token_counter=counter,
            usage_builder=self._usage_builder,
            default_model=default_model,
            dry_run_prefix=dry_run_prefix,
        )
        self._relay = relay or StreamRelay()
        self._cost_calculator = cost_calculator or CostCalculator()
        self._client = client

    async def answer(
        self,
        question: str,
        sink: EventSink,
        model: str | None = None,
        timeout: float | None = None,
    ) -> UsageResult:
        """
        Stream an answer to the sink and report its usage.

        Args:
            question: Question text (dry-run prefix only sizes it)
            sink: Push-style writer receiving server-sent events
            model: Optional model override (provider model if empty)
            timeout: Optional deadline in seconds for the streamed answer

        Returns:
            Priced usage record (unpriced prompt-only record for dry runs)

        Raises:
            UnsupportedSinkError: If the sink cannot write and flush
            TokenCountError: If the question cannot be tokenized
            ExceedsContextError: If the question does not fit the model
            StreamError: If the stream fails to open, fails or times out
            WriteError: If an event cannot be delivered
        """
        self._check_sink(sink)
        plan = self._planner.plan(
            question,
            model or self._config.model,
            self._config.temperature,
            self._config.top_p,
        )

        bind_call_context(self.get_name(), plan.model, plan.is_dry_run)
        try:
            if plan.is_dry_run:
                logger.info("Dry run accepted", prompt_tokens=plan.prompt_token_count)
                return plan.dry_run_usage

            answer_text = await self._stream_answer(plan.request, sink, timeout)
            return self._account(plan.model, question, answer_text)
        finally:
            clear_call_context()

    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name
        """
        return "aimlapi"

    def get_pricing(self) -> str:
        """
        Get pricing notes.

        Returns:
            Pricing description pointing at the official page
        """
        return PRICING_DESCRIPTION

    def _check_sink(self, sink: object) -> None:
        if not isinstance(sink, EventSink):
            raise UnsupportedSinkError(
                f"{type(sink).__name__} does not support write and flush"
            )

    async def _stream_answer(
        self, request: ChatRequest, sink: EventSink, timeout: float | None
    ) -> str:
        """
        Open the stream and relay it to the sink.

        Args:
            request: Bounded chat request
            sink: Event sink
            timeout: Optional deadline in seconds

        Returns:
            Accumulated answer text
        """
        stream = await self._open_stream(request)
        async with stream:
            async with aclosing(self._iter_fragments(stream)) as fragments:
                return await self._relay_within(fragments, sink, timeout)

    async def _open_stream(
        self, request: ChatRequest
    ) -> AsyncStream[ChatCompletionChunk]:
        """
        Issue the streaming chat completion request.

        Raises:
            StreamError: If the request cannot be opened
        """
        client = self._get_client()
        try:
            return await client.chat.completions.create(
                **request.to_params(), stream=True
            )
        except OpenAIError as e:
            error_msg = self._build_error_message(e, "AI/ML API stream failed to open")
            logger.error("AI/ML API error", error=str(e))
            raise StreamError(error_msg) from e

    async def _relay_within(
        self,
        fragments: AsyncIterator[str],
        sink: EventSink,
        timeout: float | None,
    ) -> str:
        """
        Relay fragments, bounded by an optional deadline.

        Raises:
            StreamError: If the deadline expires
        """
        try:
            return await asyncio.wait_for(
                self._relay.relay(fragments, sink), timeout=timeout
            )
        except asyncio.TimeoutError as e:
            logger.error("Stream deadline exceeded", timeout=timeout)
            raise StreamError(f"Stream timed out after {timeout} seconds") from e

    async def _iter_fragments(
        self, stream: AsyncStream[ChatCompletionChunk]
    ) -> AsyncIterator[str]:
        """Yield the text fragment of each chunk that carries a choice."""
        async for chunk in stream:
            if not chunk.choices:
                continue
            yield chunk.choices[0].delta.content or ""

    def _account(self, model: str, question: str, answer_text: str) -> UsageResult:
        """
        Build and price the usage record of a finished exchange.

        Args:
            model: Resolved model name
            question: Question text
            answer_text: Accumulated answer

        Returns:
            Priced usage record
        """
        usage = self._usage_builder.build(model, question, answer_text)
        priced = self._cost_calculator.apply(usage, model)
        log_llm_call(
            provider=self.get_name(),
            model=model,
            tokens=priced.total_token_count,
            price=str(priced.total_price),
        )
        return priced

    def _get_client(self) -> AsyncOpenAI:
        """
        Get or create AI/ML API client.

        Returns:
            OpenAI-compatible async client

        Raises:
            ConfigurationError: If no API key is configured
        """
        if not self._client:
            if not self._config.api_key:
                raise ConfigurationError("AI/ML API key is not configured")
            self._client = AsyncOpenAI(
                api_key=self._config.api_key,
                base_url=self._config.base_url,
                default_headers=self._config.default_headers(),
                http_client=self._build_http_client(),
            )
        return self._client

    def _build_http_client(self) -> httpx.AsyncClient | None:
        """Build an HTTP client routed through the configured proxy."""
        if not self._config.http_proxy:
            return None
        return httpx.AsyncClient(proxy=self._config.http_proxy)

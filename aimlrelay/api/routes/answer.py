"""
Streaming answer endpoints.

Sandi Metz Principles:
- Single Responsibility: HTTP request handling
- Small functions: Minimal logic in endpoints
- Dependency Injection: Provider injected
"""

import asyncio
import json
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, StreamingResponse

from aimlrelay.api.deps import get_provider, get_stream_timeout
from aimlrelay.exceptions import AppError
from aimlrelay.llm.provider import BaseModelProvider
from aimlrelay.llm.sink import QueueEventSink, format_event
from aimlrelay.models.query import AnswerRequest
from aimlrelay.utils.logger import get_logger, log_error

router = APIRouter()
logger = get_logger(__name__)


async def run_answer(
    provider: BaseModelProvider,
    request: AnswerRequest,
    sink: QueueEventSink,
    timeout: Optional[float] = None,
) -> None:
    """
    Answer a question into the sink, then report usage or the error.

    Args:
        provider: Model provider
        request: Answer request
        sink: Queue-backed event sink (closed when done)
        timeout: Optional deadline in seconds
    """
    try:
        usage = await provider.answer(
            request.question, sink, model=request.get_model(), timeout=timeout
        )
        await sink.write(format_event(usage.model_dump_json(), event="usage"))
    except AppError as e:
        log_error(e, "answer", model=request.get_model())
        payload = json.dumps({"type": type(e).__name__, "message": str(e)})
        await sink.write(format_event(payload, event="error"))
    except Exception as e:
        log_error(e, "answer", model=request.get_model())
        payload = json.dumps(
            {"type": "InternalError", "message": "Internal server error"}
        )
        await sink.write(format_event(payload, event="error"))
    finally:
        await sink.close()


@router.post("/answer")
async def answer(
    request: AnswerRequest,
    provider: BaseModelProvider = Depends(get_provider),  # noqa: B008
    timeout: Optional[float] = Depends(get_stream_timeout),  # noqa: B008
) -> StreamingResponse:
    """
    Stream the answer to a question as server-sent events.

    Args:
        request: Answer request
        provider: Model provider (injected)
        timeout: Stream deadline (injected)

    Returns:
        Event stream of message events followed by a usage or error event
    """
    sink = QueueEventSink()
    task = asyncio.create_task(run_answer(provider, request, sink, timeout))

    async def body() -> AsyncIterator[str]:
        try:
            async for payload in sink.events():
                yield payload
        finally:
            if not task.done():
                task.cancel()

    return StreamingResponse(body(), media_type="text/event-stream")


@router.get("/pricing", response_class=PlainTextResponse)
async def pricing(
    provider: BaseModelProvider = Depends(get_provider),  # noqa: B008
) -> str:
    """
    Get pricing notes for the provider.

    Returns:
        Plain-text pricing description
    """
    return provider.get_pricing()

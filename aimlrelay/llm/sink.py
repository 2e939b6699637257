"""
Server-sent event sinks.

Sandi Metz Principles:
- Interface Segregation: Sinks only write and flush
- Single Responsibility: Frame and deliver events
"""

import asyncio
from typing import AsyncIterator, List, Optional, Protocol, runtime_checkable


def format_event(data: str, event: str = "message") -> str:
    """
    Frame data as one server-sent event.

    Data is written verbatim; a fragment with embedded newlines yields
    extra lines inside the event.

    Args:
        data: Event payload
        event: Event type

    Returns:
        Framed event text ending with a blank line
    """
    return f"event: {event}\ndata: {data}\n\n"


@runtime_checkable
class EventSink(Protocol):
    """Push-style writer that delivers output as soon as it is flushed."""

    async def write(self, data: str) -> None:
        ...

    async def flush(self) -> None:
        ...


class QueueEventSink:
    """
    Event sink backed by an asyncio queue.

    Writes are buffered until flush; each flush becomes one item yielded
    by events(). close() ends the event stream.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Optional[str]] = asyncio.Queue()
        self._buffer: List[str] = []
        self._closed = False

    async def write(self, data: str) -> None:
        if self._closed:
            raise RuntimeError("Sink is closed")
        self._buffer.append(data)

    async def flush(self) -> None:
        if not self._buffer:
            return
        payload = "".join(self._buffer)
        self._buffer.clear()
        await self._queue.put(payload)

    async def close(self) -> None:
        """Flush pending data and signal end of stream."""
        if self._closed:
            return
        await self.flush()
        self._closed = True
        await self._queue.put(None)

    async def events(self) -> AsyncIterator[str]:
        """Yield flushed payloads until the sink is closed."""
        while True:
            payload = await self._queue.get()
            if payload is None:
                return
            yield payload

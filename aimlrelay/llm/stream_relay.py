"""
Streaming relay from chat fragments to an event sink.

Sandi Metz Principles:
- Single Responsibility: Filter, forward and accumulate fragments
- Small methods: Receive, filter and emit isolated
"""

from typing import AsyncIterator, List

from aimlrelay.exceptions import StreamError, WriteError
from aimlrelay.llm.sink import EventSink, format_event
from aimlrelay.utils.logger import get_logger

logger = get_logger(__name__)

_END = object()


def is_newline_run(fragment: str) -> bool:
    """Check if a non-empty fragment holds only newline characters."""
    return bool(fragment) and fragment.count("\n") == len(fragment)


class StreamRelay:
    """
    Relay streamed text fragments to a sink as server-sent events.

    Newline-only fragments arriving before any content are dropped. The
    first other fragment, including an empty one, ends that phase and is
    forwarded; later newline-only fragments are forwarded verbatim.
    """

    async def relay(self, fragments: AsyncIterator[str], sink: EventSink) -> str:
        """
        Forward fragments in arrival order and accumulate them.

        Args:
            fragments: Async iterator of text fragments
            sink: Event sink receiving one event per forwarded fragment

        Returns:
            Concatenation of all forwarded fragments

        Raises:
            StreamError: If receiving a fragment fails
            WriteError: If writing or flushing an event fails
        """
        parts: List[str] = []
        leading = True

        while True:
            fragment = await self._receive(fragments)
            if fragment is _END:
                break

            if leading:
                if is_newline_run(fragment):
                    continue
                leading = False

            await self._emit(sink, fragment)
            parts.append(fragment)

        logger.debug("Stream finished", fragments=len(parts))
        return "".join(parts)

    async def _receive(self, fragments: AsyncIterator[str]):
        """
        Receive the next fragment.

        Returns:
            Next fragment, or _END when the stream is exhausted

        Raises:
            StreamError: If the transport fails
        """
        try:
            return await anext(fragments)
        except StopAsyncIteration:
            return _END
        except Exception as e:
            logger.error("Stream receive failed", error=str(e))
            raise StreamError(f"Stream receive failed: {e}") from e

    async def _emit(self, sink: EventSink, fragment: str) -> None:
        """
        Write one fragment as an event and flush it.

        Raises:
            WriteError: If the sink rejects the write or flush
        """
        try:
            await sink.write(format_event(fragment))
            await sink.flush()
        except Exception as e:
            logger.error("Event write failed", error=str(e))
            raise WriteError(f"Event write failed: {e}") from e

"""
Progress emitter for the SSE demo stream.

Walks a fixed list of messages and turns each one into a ProgressEvent,
written as one `data: <json>\n\n` record with an optional pause between
records. Any failure while producing the stream is converted into a single
`{"error": ...}` record, after which the stream ends.
"""

import asyncio
import logging
import math
from typing import AsyncIterator, Callable, Iterator, List, Optional

from progress_stream.config import settings
from progress_stream.models.event import ErrorEvent, ProgressEvent
from progress_stream.utils.sse import format_event_sse
from progress_stream.utils.time import utcnow_iso

logger = logging.getLogger(__name__)


def compute_progress(index: int, total: int) -> int:
    """Percentage for the record at `index` out of `total` records.

    Half values round up (2.5 -> 3), matching browser `Math.round`.
    A single-record stream reports 0.
    """
    if total <= 1:
        return 0
    return math.floor(index * 100 / (total - 1) + 0.5)


class ProgressEmitter:
    """Produces the ordered SSE records for one stream."""

    def __init__(
        self,
        messages: Optional[List[str]] = None,
        delay: Optional[float] = None,
        clock: Callable[[], str] = utcnow_iso,
    ):
        self.messages = list(settings.stream_messages if messages is None else messages)
        self.delay = settings.stream_delay_seconds if delay is None else delay
        self.clock = clock

    def build_events(self) -> Iterator[ProgressEvent]:
        """Yield one event per message, in order."""
        total = len(self.messages)
        for index, message in enumerate(self.messages):
            yield ProgressEvent(
                id=index,
                message=message,
                timestamp=self.clock(),
                progress=compute_progress(index, total),
            )

    async def stream(self) -> AsyncIterator[str]:
        """
        Yield SSE records for every message.

        The pause is skipped after the last record. On failure exactly one
        error record is yielded and the generator returns.
        """
        total = len(self.messages)
        logger.info(f"Starting progress stream: {total} messages, delay={self.delay}s")
        try:
            for event in self.build_events():
                yield format_event_sse(event)

                if event.id < total - 1 and self.delay > 0:
                    await asyncio.sleep(self.delay)
        except Exception as e:
            logger.exception("Streaming error")
            yield format_event_sse(ErrorEvent(error=str(e) or type(e).__name__))
            return

        logger.info("Progress stream finished")

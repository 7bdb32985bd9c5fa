"""
Stream console: the start and clear actions of the progress viewer.

start(url) validates the endpoint, opens `GET <url>` with
`Accept: text/event-stream`, and feeds response bytes through the SSE record
buffer as they arrive. Each record updates the display log; the controller
tracks where the stream is in its lifecycle.
"""

import asyncio
import logging
from typing import Optional

import httpx

from progress_stream.client.display import DisplayLog, MessageType
from progress_stream.client.errors import ConfigurationError, InvalidTransition, TransportError
from progress_stream.client.parser import SSERecordBuffer, parse_record
from progress_stream.client.state import StreamController, StreamStatus
from progress_stream.client.store import EndpointStore, validate_endpoint
from progress_stream.config import settings

logger = logging.getLogger(__name__)


class StreamConsole:
    """Consumer for one progress stream at a time."""

    def __init__(
        self,
        store: Optional[EndpointStore] = None,
        display: Optional[DisplayLog] = None,
        controller: Optional[StreamController] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.store = store or EndpointStore(settings.client_store_path)
        self.display = display or DisplayLog()
        self.controller = controller or StreamController()
        self.timeout = settings.client_timeout if timeout is None else timeout
        self._transport = transport
        self._task: Optional[asyncio.Task] = None
        self._cancel_requested = False

        # Saved endpoint is read once on startup
        self.endpoint = self.store.load_endpoint() or ""

    def set_endpoint(self, url: str) -> None:
        """Change the endpoint and persist it."""
        self.endpoint = url
        self.store.save_endpoint(url)

    def clear(self) -> None:
        """Reset the log and progress. The status returns to ready unless a stream is open."""
        self.display.clear()
        if not self.controller.is_active:
            self.controller.reset()

    def cancel(self) -> bool:
        """Abort the active stream, unblocking any pending read."""
        if not self.controller.cancel():
            return False
        self._cancel_requested = True
        logger.info("Stream cancelled")
        if self._task is not None and self._task is not asyncio.current_task():
            self._task.cancel()
        return True

    async def start(self, url: Optional[str] = None) -> StreamStatus:
        """
        Run one stream to completion and return the final status.

        Configuration and transport errors end up as an error message and
        the ERROR status; they are not raised. Starting while a stream is
        open raises InvalidTransition.
        """
        if not self.controller.can_start:
            raise InvalidTransition("A stream is already active")

        try:
            url = validate_endpoint(self.endpoint if url is None else url)
        except ConfigurationError as e:
            self.controller.error(e.reason)
            self.display.add_message(f"Error: {e.detail}", MessageType.ERROR)
            return self.controller.status

        if url != self.endpoint:
            self.set_endpoint(url)

        self.display.clear()
        self.controller.start()
        self._task = asyncio.current_task()
        self._cancel_requested = False

        try:
            await self._consume(url)
        except TransportError as e:
            if self.controller.is_active:
                logger.error(f"Streaming error: {e}")
                self.display.add_message(f"Error: {e}", MessageType.ERROR)
                self.controller.error(str(e))
        except asyncio.CancelledError:
            if not self._cancel_requested:
                raise
            task = asyncio.current_task()
            if task is not None:
                task.uncancel()
        except Exception as e:
            if self.controller.is_active:
                logger.exception("Unexpected streaming error")
                self.display.add_message(f"Error: {e}", MessageType.ERROR)
                self.controller.error(str(e) or type(e).__name__)
            raise
        finally:
            self._task = None

        return self.controller.status

    async def _consume(self, url: str) -> None:
        self.display.add_message("Connecting to stream endpoint...", MessageType.INFO)
        self.display.add_message(f"URL: {url}", MessageType.INFO)

        buffer = SSERecordBuffer()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                async with client.stream(
                    "GET", url, headers={"Accept": "text/event-stream"}
                ) as response:
                    if not response.is_success:
                        raise TransportError(f"HTTP error! status: {response.status_code}")

                    self.display.add_message(
                        "Connection established. Receiving data...", MessageType.INFO
                    )

                    async for chunk in response.aiter_bytes():
                        if not self.controller.is_active:
                            return
                        self.controller.chunk_received()
                        for record in buffer.feed(chunk):
                            self._handle_record(record)
                            if not self.controller.is_active:
                                return
        except (httpx.HTTPError, httpx.StreamError, httpx.InvalidURL) as e:
            raise TransportError(str(e) or type(e).__name__) from e

        leftover = buffer.close()
        if leftover.strip():
            logger.debug(f"Discarding incomplete record at end of stream: {leftover!r}")

        if self.controller.is_active:
            self.display.add_message("Stream completed successfully!", MessageType.SUCCESS)
            self.controller.stream_closed()

    def _handle_record(self, record: str) -> None:
        parsed = parse_record(record)
        if parsed is None:
            return

        if parsed.is_error:
            self.display.add_message(parsed.text, MessageType.ERROR)
            return

        self.display.add_message(parsed.text, MessageType.DATA)
        if parsed.progress is not None:
            self.display.set_progress(parsed.progress)

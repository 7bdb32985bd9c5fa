"""
Stream lifecycle for the consumer.

    IDLE -> CONNECTING -> STREAMING -> COMPLETE
                 \\            \\
                  +-----------> ERROR

Only the controller changes the status, and only through start,
chunk_received, stream_closed, error, cancel and reset.
"""

import logging
from enum import Enum
from typing import List, Optional

from progress_stream.client.display import DisplayListener
from progress_stream.client.errors import InvalidTransition

logger = logging.getLogger(__name__)


class StreamStatus(str, Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    STREAMING = "streaming"
    COMPLETE = "complete"
    ERROR = "error"


ACTIVE_STATES = {StreamStatus.CONNECTING, StreamStatus.STREAMING}

CANCELLED_REASON = "cancelled"


class StreamController:
    """Owns the status of the one stream a consumer may have open."""

    def __init__(self):
        self.status = StreamStatus.IDLE
        self.reason: Optional[str] = None
        self._listeners: List[DisplayListener] = []

    def add_listener(self, listener: DisplayListener) -> None:
        self._listeners.append(listener)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATES

    @property
    def can_start(self) -> bool:
        """Whether the start trigger is enabled."""
        return not self.is_active

    @property
    def status_text(self) -> str:
        if self.status == StreamStatus.IDLE:
            return "Status: Ready"
        if self.status == StreamStatus.COMPLETE:
            return "Status: Complete"
        if self.status == StreamStatus.ERROR:
            return f"Status: Error - {self.reason}"
        return "Status: Streaming data..."

    def start(self) -> None:
        if not self.can_start:
            raise InvalidTransition(f"Cannot start a stream while {self.status.value}")
        self._move(StreamStatus.CONNECTING)

    def chunk_received(self) -> None:
        if not self.is_active:
            raise InvalidTransition(f"Received data while {self.status.value}")
        if self.status != StreamStatus.STREAMING:
            self._move(StreamStatus.STREAMING)

    def stream_closed(self) -> None:
        if not self.is_active:
            raise InvalidTransition(f"Stream closed while {self.status.value}")
        self._move(StreamStatus.COMPLETE)

    def error(self, reason: str) -> None:
        self._move(StreamStatus.ERROR, reason)

    def cancel(self) -> bool:
        """Abort an active stream. Returns False when nothing was active."""
        if not self.is_active:
            return False
        self._move(StreamStatus.ERROR, CANCELLED_REASON)
        return True

    def reset(self) -> None:
        if self.is_active:
            raise InvalidTransition("Cannot reset an active stream")
        self._move(StreamStatus.IDLE)

    def _move(self, status: StreamStatus, reason: Optional[str] = None) -> None:
        logger.debug(f"Stream status {self.status.value} -> {status.value}")
        self.status = status
        self.reason = reason
        text = self.status_text
        for listener in self._listeners:
            listener.status_changed(status, text)

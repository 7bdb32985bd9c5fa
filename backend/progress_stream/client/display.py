"""
Display state for the consumer: an append-only message log and a progress
value that is replaced in place.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Callable, List

if TYPE_CHECKING:
    from progress_stream.client.state import StreamStatus


class MessageType(str, Enum):
    INFO = "info"
    DATA = "data"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class DisplayMessage:
    text: str
    type: MessageType
    rendered_at: datetime  # wall clock at render time, not the event's own timestamp


class DisplayListener:
    """Receives display and status updates. Override what you need."""

    def message_added(self, message: DisplayMessage) -> None:
        pass

    def progress_changed(self, progress: int) -> None:
        pass

    def cleared(self) -> None:
        pass

    def status_changed(self, status: "StreamStatus", text: str) -> None:
        pass


class DisplayLog:
    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self.messages: List[DisplayMessage] = []
        self.progress = 0
        self._listeners: List[DisplayListener] = []

    def add_listener(self, listener: DisplayListener) -> None:
        self._listeners.append(listener)

    def add_message(self, text: str, type: MessageType = MessageType.DATA) -> DisplayMessage:
        message = DisplayMessage(text=text, type=type, rendered_at=self.clock())
        self.messages.append(message)
        for listener in self._listeners:
            listener.message_added(message)
        return message

    def set_progress(self, progress: int) -> None:
        self.progress = max(0, min(100, progress))
        for listener in self._listeners:
            listener.progress_changed(self.progress)

    def clear(self) -> None:
        self.messages = []
        self.progress = 0
        for listener in self._listeners:
            listener.cleared()

    def texts(self, type: MessageType | None = None) -> List[str]:
        """Message texts in arrival order, optionally filtered by type."""
        return [m.text for m in self.messages if type is None or m.type == type]

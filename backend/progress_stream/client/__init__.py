from progress_stream.client.console import StreamConsole
from progress_stream.client.display import DisplayListener, DisplayLog, MessageType
from progress_stream.client.errors import ConfigurationError, InvalidTransition, StreamError, TransportError
from progress_stream.client.parser import SSERecordBuffer, parse_record
from progress_stream.client.state import StreamController, StreamStatus
from progress_stream.client.store import EndpointStore, validate_endpoint

__all__ = [
    "ConfigurationError",
    "DisplayListener",
    "DisplayLog",
    "EndpointStore",
    "InvalidTransition",
    "MessageType",
    "SSERecordBuffer",
    "StreamConsole",
    "StreamController",
    "StreamError",
    "StreamStatus",
    "TransportError",
    "parse_record",
    "validate_endpoint",
]

from progress_stream.utils.sse import format_event_sse, format_sse
from progress_stream.utils.time import utcnow, utcnow_iso

__all__ = ["format_event_sse", "format_sse", "utcnow", "utcnow_iso"]

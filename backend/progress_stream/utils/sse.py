import orjson
from pydantic import BaseModel

SSE_DATA_PREFIX = "data: "
SSE_RECORD_SEPARATOR = "\n\n"


def format_sse(payload: dict) -> str:
    """Format a payload as a single SSE data record"""
    return f"{SSE_DATA_PREFIX}{orjson.dumps(payload).decode()}{SSE_RECORD_SEPARATOR}"


def format_event_sse(event: BaseModel) -> str:
    """Format an event model as an SSE data record"""
    return format_sse(event.model_dump())

"""
Progress stream route.

GET /api/stream - emits the configured progress messages as SSE records:
    data: {"id": 0, "message": "...", "timestamp": "...", "progress": 0}

The connection is closed after the last record; there is no terminal event.
"""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import StreamingResponse

from progress_stream.config import settings
from progress_stream.services.emitter import ProgressEmitter
from progress_stream.utils.exceptions import raise_bad_request, raise_internal_error

router = APIRouter()

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "X-Accel-Buffering": "no",  # Disable nginx buffering
}


@router.get("/stream")
async def stream_progress(
    delay: Optional[float] = Query(None, description="Pause between records in seconds"),
):
    """
    GET /api/stream - stream scripted progress over SSE

    Optional `delay` overrides the configured pause between records.
    """
    if delay is not None and not 0 <= delay <= settings.max_stream_delay_seconds:
        raise_bad_request(
            f"delay must be between 0 and {settings.max_stream_delay_seconds} seconds"
        )

    if not settings.stream_messages:
        raise_internal_error("No stream messages configured")

    emitter = ProgressEmitter(delay=delay)

    return StreamingResponse(
        emitter.stream(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )

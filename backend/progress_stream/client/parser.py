"""
Incremental SSE framing for the progress stream.

Network chunks are decoded as UTF-8 (a multi-byte character split across two
chunks is held back until complete), appended to the receive buffer and split
on the blank-line separator. The last segment stays in the buffer; every
other segment is a complete record.
"""

import codecs
import math
import logging
from dataclasses import dataclass
from typing import List, Optional, Union

import orjson

from progress_stream.utils.sse import SSE_DATA_PREFIX, SSE_RECORD_SEPARATOR

logger = logging.getLogger(__name__)


class SSERecordBuffer:
    """Receive buffer holding the not-yet-complete tail of the stream."""

    def __init__(self):
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self.buffer = ""

    def feed(self, chunk: Union[bytes, str]) -> List[str]:
        """Append a chunk and return the records it completed, in order."""
        text = self._decoder.decode(chunk) if isinstance(chunk, bytes) else chunk
        self.buffer += text
        *records, self.buffer = self.buffer.split(SSE_RECORD_SEPARATOR)
        return records

    def close(self) -> str:
        """End of input. Returns (and drops) whatever incomplete tail is left."""
        leftover = self.buffer + self._decoder.decode(b"", final=True)
        self.buffer = ""
        return leftover


@dataclass(frozen=True)
class ParsedRecord:
    """What a single record asks the consumer to show"""

    text: str
    is_error: bool = False
    progress: Optional[int] = None
    payload: Optional[dict] = None  # None when the JSON could not be decoded


def clamp_progress(value) -> Optional[int]:
    """Round half up to a whole percent and clamp to 0-100. Non-numbers give None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return max(0, min(100, math.floor(value + 0.5)))


def parse_record(record: str) -> Optional[ParsedRecord]:
    """
    Interpret one complete record.

    Returns None for records without a `data: ` prefix. Undecodable JSON is
    not an error: the raw payload comes back as a plain data message.
    """
    if not record.startswith(SSE_DATA_PREFIX):
        return None

    raw = record[len(SSE_DATA_PREFIX):]
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        logger.warning(f"Failed to parse JSON: {e}")
        return ParsedRecord(text=f"Received: {raw}")

    if not isinstance(data, dict):
        return ParsedRecord(text=f"Received: {raw}")

    if data.get("error") is not None:
        return ParsedRecord(text=f"Error: {data['error']}", is_error=True, payload=data)

    return ParsedRecord(
        text=f"[{data.get('id')}] {data.get('message')}",
        progress=clamp_progress(data.get("progress")),
        payload=data,
    )

"""
Event models carried in the progress stream.

Success records: {id, message, timestamp, progress}
Failure records: {error}
"""

from pydantic import BaseModel, ConfigDict, Field


class ProgressEvent(BaseModel):
    """One step of the progress stream"""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    message: str
    timestamp: str  # ISO-8601, UTC
    progress: int = Field(ge=0, le=100)


class ErrorEvent(BaseModel):
    """Terminal record sent when the emitter fails mid-stream"""

    model_config = ConfigDict(frozen=True)

    error: str

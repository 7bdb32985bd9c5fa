import logging
import sys
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings


def setup_logging():
    """Configure application logging."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# Initialize logging on import
setup_logging()

logger = logging.getLogger(__name__)


DEFAULT_STREAM_MESSAGES = [
    "Starting data stream...",
    *[f"Processing item {i} of 10" for i in range(1, 11)],
    "Stream complete!",
]


class Settings(BaseSettings):
    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Emitter: scripted progress messages and simulated latency between records (seconds)
    stream_messages: List[str] = DEFAULT_STREAM_MESSAGES
    stream_delay_seconds: float = 2.0
    max_stream_delay_seconds: float = 30.0

    # Consumer: connect/read timeout (seconds) and persisted key-value store
    client_timeout: float = 60.0
    client_store_path: Path = Path.home() / ".progress_stream" / "settings.json"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

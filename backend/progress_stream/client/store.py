"""
Persisted consumer settings and endpoint validation.

The endpoint URL lives in a small JSON key-value file under the fixed key
`apiEndpoint`. It is read once when the console starts and written whenever
the endpoint changes.
"""

import logging
from pathlib import Path
from typing import Optional

import httpx
import orjson
from pydantic import AnyUrl, TypeAdapter, ValidationError

from progress_stream.client.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENDPOINT_KEY = "apiEndpoint"

_url_adapter = TypeAdapter(AnyUrl)


def validate_endpoint(url: Optional[str]) -> str:
    """Return the trimmed URL or raise ConfigurationError."""
    url = (url or "").strip()
    if not url:
        raise ConfigurationError(
            "API endpoint URL is required", reason="Please enter an API endpoint URL"
        )
    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError:
        raise ConfigurationError("Please enter a valid URL", reason="Invalid URL format")
    if not parsed.host:
        raise ConfigurationError("Please enter a valid URL", reason="Invalid URL format")
    # httpx is stricter than the URL parser about control characters
    try:
        httpx.URL(url)
    except httpx.InvalidURL:
        raise ConfigurationError("Please enter a valid URL", reason="Invalid URL format")
    return url


class EndpointStore:
    """Key-value settings file shared across consumer sessions."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = orjson.loads(self.path.read_bytes())
        except orjson.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))

    def load_endpoint(self) -> Optional[str]:
        return self.get(ENDPOINT_KEY)

    def save_endpoint(self, url: str) -> None:
        logger.debug(f"Saving endpoint {url}")
        self.set(ENDPOINT_KEY, url)

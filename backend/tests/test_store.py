"""Tests for endpoint validation and the persisted settings store."""

import pytest

from progress_stream.client.errors import ConfigurationError
from progress_stream.client.store import ENDPOINT_KEY, EndpointStore, validate_endpoint


def test_validate_endpoint_accepts_absolute_url():
    assert validate_endpoint("  https://example.com/api/stream  ") == "https://example.com/api/stream"


@pytest.mark.parametrize("url", ["", "   ", None])
def test_validate_endpoint_requires_url(url):
    with pytest.raises(ConfigurationError) as exc_info:
        validate_endpoint(url)

    assert exc_info.value.detail == "API endpoint URL is required"
    assert exc_info.value.reason == "Please enter an API endpoint URL"


@pytest.mark.parametrize(
    "url",
    ["not a url", "/api/stream", "http://", "http://example.com/a\nb", "http://example.com/a\x7fb", "http://example.com/a\x00b"],
)
def test_validate_endpoint_rejects_malformed(url):
    with pytest.raises(ConfigurationError) as exc_info:
        validate_endpoint(url)

    assert exc_info.value.detail == "Please enter a valid URL"
    assert exc_info.value.reason == "Invalid URL format"


def test_store_persists_endpoint_across_instances(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    EndpointStore(path).save_endpoint("http://localhost:8000/api/stream")

    assert EndpointStore(path).load_endpoint() == "http://localhost:8000/api/stream"


def test_store_keeps_other_keys(tmp_path):
    store = EndpointStore(tmp_path / "settings.json")
    store.set("theme", "dark")
    store.save_endpoint("http://a.example/stream")

    assert store.get("theme") == "dark"
    assert store.get(ENDPOINT_KEY) == "http://a.example/stream"


def test_store_missing_file(tmp_path):
    assert EndpointStore(tmp_path / "missing.json").load_endpoint() is None


def test_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{broken")

    assert EndpointStore(path).load_endpoint() is None

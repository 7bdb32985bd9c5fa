"""Tests for the progress-stream command line."""

import pytest
from click.testing import CliRunner

from progress_stream.cli import main
from progress_stream.client.store import EndpointStore
from progress_stream.config import settings


@pytest.fixture
def store_path(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "client_store_path", path)
    return path


def test_endpoint_without_saved_value(store_path):
    result = CliRunner().invoke(main, ["endpoint"])

    assert result.exit_code == 0
    assert "(no endpoint saved)" in result.output


def test_endpoint_saves_url(store_path):
    result = CliRunner().invoke(main, ["endpoint", "http://localhost:8000/api/stream"])

    assert result.exit_code == 0
    assert "Saved endpoint: http://localhost:8000/api/stream" in result.output
    assert EndpointStore(store_path).load_endpoint() == "http://localhost:8000/api/stream"

    shown = CliRunner().invoke(main, ["endpoint"])
    assert "http://localhost:8000/api/stream" in shown.output


def test_endpoint_rejects_malformed_url(store_path):
    result = CliRunner().invoke(main, ["endpoint", "not a url"])

    assert result.exit_code == 2
    assert "Please enter a valid URL" in result.output
    assert EndpointStore(store_path).load_endpoint() is None


def test_watch_without_endpoint_fails_before_network(store_path):
    result = CliRunner().invoke(main, ["watch"])

    assert result.exit_code == 1
    assert "API endpoint URL is required" in result.output

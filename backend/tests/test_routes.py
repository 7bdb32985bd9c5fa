"""Tests for the HTTP API: health check and the SSE stream endpoint."""

import orjson
import pytest
from fastapi.testclient import TestClient

from progress_stream.config import DEFAULT_STREAM_MESSAGES, settings
from progress_stream.main import app


@pytest.fixture
def client():
    return TestClient(app)


def parse_body(body: str) -> list[dict]:
    assert body.endswith("\n\n")
    return [orjson.loads(r[len("data: "):]) for r in body.split("\n\n") if r]


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_stream_headers(client):
    response = client.get("/api/stream", params={"delay": 0})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert response.headers["cache-control"] == "no-cache"
    assert response.headers["x-accel-buffering"] == "no"
    assert response.headers["access-control-allow-origin"] == "*"


def test_stream_emits_default_messages_in_order(client):
    response = client.get("/api/stream", params={"delay": 0})
    payloads = parse_body(response.text)

    assert [p["id"] for p in payloads] == list(range(len(DEFAULT_STREAM_MESSAGES)))
    assert [p["message"] for p in payloads] == DEFAULT_STREAM_MESSAGES
    assert payloads[0]["progress"] == 0
    assert payloads[-1]["progress"] == 100
    assert set(payloads[0]) == {"id", "message", "timestamp", "progress"}


def test_stream_uses_configured_messages(client, monkeypatch):
    monkeypatch.setattr(settings, "stream_messages", ["Starting", "Done"])
    payloads = parse_body(client.get("/api/stream", params={"delay": 0}).text)

    assert [(p["id"], p["progress"]) for p in payloads] == [(0, 0), (1, 100)]


@pytest.mark.parametrize("delay", [-1, 10_000])
def test_stream_rejects_out_of_range_delay(client, delay):
    response = client.get("/api/stream", params={"delay": delay})

    assert response.status_code == 400
    assert "delay must be between" in response.json()["detail"]


def test_stream_without_messages_is_server_error(client, monkeypatch):
    monkeypatch.setattr(settings, "stream_messages", [])
    response = client.get("/api/stream", params={"delay": 0})

    assert response.status_code == 500

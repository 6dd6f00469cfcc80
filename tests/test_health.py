"""
Tests for the health and root endpoints.
"""
from fastapi.testclient import TestClient

from app.main import app

from tests.helpers import RecordingStream


def test_health_check(client, hub):
    hub.subscribe("a@x.com", RecordingStream())

    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "healthy"
    assert data["sse_subscribers"] == 1


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_shutdown_closes_open_streams():
    stream = RecordingStream()
    with TestClient(app) as c:
        c.app.state.hub.subscribe("a@x.com", stream)

    assert stream.closed

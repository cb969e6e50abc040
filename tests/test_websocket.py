"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from snakeuh.server.app import create_app


@pytest.fixture()
def tc():
    """Sync TestClient run as a context manager so the lifespan and the
    frame loops share one event loop."""
    with TestClient(create_app()) as client:
        yield client


def _create_session(tc, **overrides):
    body = {"frame_ms": 5, "default_step_ms": 10, "min_step_ms": 5, "seed": 0}
    body.update(overrides)
    resp = tc.post("/sessions", json=body)
    assert resp.status_code == 201
    return resp.json()["session_id"]


class TestPlayWebSocket:
    def test_connect_and_receive_initial_state(self, tc):
        sid = _create_session(tc)
        with tc.websocket_connect(f"/sessions/{sid}/play") as ws:
            state = json.loads(ws.receive_text())
            assert state["status"] == "running"
            assert "snake" in state
            assert "food" in state

    def test_direction_reaches_engine(self, tc):
        sid = _create_session(tc)
        with tc.websocket_connect(f"/sessions/{sid}/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"direction": "left"}))
            for _ in range(200):
                state = json.loads(ws.receive_text())
                if state["heading"]["current"] == "left":
                    break
            assert state["heading"]["current"] == "left"

    def test_garbage_messages_ignored(self, tc):
        sid = _create_session(tc)
        with tc.websocket_connect(f"/sessions/{sid}/play") as ws:
            ws.receive_text()
            ws.send_text("not json")
            ws.send_text(json.dumps([1, 2]))
            ws.send_text(json.dumps({"direction": "sideways"}))
            state = json.loads(ws.receive_text())
            assert state["status"] == "running"

    def test_quit_message_terminates(self, tc):
        sid = _create_session(tc)
        with tc.websocket_connect(f"/sessions/{sid}/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"quit": True}))
            final = None
            for _ in range(200):
                state = json.loads(ws.receive_text())
                if state["status"] == "terminated":
                    final = state
                    break
            assert final is not None
            assert final["reason"] == "quit"
        resp = tc.get(f"/sessions/{sid}")
        assert resp.json()["status"] == "terminated"

    def test_nonexistent_session_rejected(self, tc):
        with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
            "/sessions/nonexistent/play",
        ):
            pass

"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from snakeuh.direction import Direction
from snakeuh.server.session_manager import SessionManager
from snakeuh.state import SessionStatus

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Send ``{"direction": ...}`` or ``{"quit": true}``, receive state."""
    manager = _get_manager(websocket)
    session = manager.get_session(session_id)
    if session is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    session.sockets.append(websocket)
    logger.info("Client connected to session %s.", session_id)

    # Send initial state snapshot so the client can draw immediately.
    await websocket.send_text(
        json.dumps(session.engine.get_state(), separators=(",", ":")),
    )

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("quit") is True:
                await manager.quit_session(session_id)
                continue

            direction_str = msg.get("direction")
            if not isinstance(direction_str, str):
                continue
            try:
                direction = Direction.from_name(direction_str)
            except ValueError:
                continue

            if session.status == SessionStatus.RUNNING:
                await manager.queue_direction(session_id, direction)
    except WebSocketDisconnect:
        logger.info("Client disconnected from session %s.", session_id)
    finally:
        if websocket in session.sockets:
            session.sockets.remove(websocket)

"""REST API route handlers for session lifecycle management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from snakeuh.server.models import CreateSessionRequest, SessionSummary

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request):
    return request.app.state.session_manager


@router.post("", status_code=201)
async def create_session(body: CreateSessionRequest, request: Request) -> SessionSummary:
    """Create a session and start its frame loop."""
    manager = _get_manager(request)
    overrides = body.model_dump(exclude={"frame_ms"}, exclude_none=True)
    try:
        session = manager.create_session(overrides, frame_ms=body.frame_ms)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List running sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata and the latest state snapshot."""
    session = _get_manager(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    result = session.summary().model_dump(mode="json")
    result["state"] = session.engine.get_state()
    return result


@router.post("/{session_id}/quit", status_code=200)
async def quit_session(session_id: str, request: Request) -> SessionSummary:
    """Terminate a session."""
    manager = _get_manager(request)
    try:
        session = await manager.quit_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return session.summary()

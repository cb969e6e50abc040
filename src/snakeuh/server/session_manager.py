"""In-memory session registry and per-session async frame loops."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from snakeuh.config import GameConfig
from snakeuh.direction import Direction
from snakeuh.engine import GameEngine
from snakeuh.server.models import SessionSummary
from snakeuh.state import SessionStatus

logger = logging.getLogger(__name__)

_MAX_FINISHED_SESSIONS = 100


@dataclass
class SessionInstance:
    """All state for a single hosted session."""

    session_id: str
    engine: GameEngine
    frame_ms: int
    sockets: list[WebSocket] = field(default_factory=list)
    pending: list[Direction] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    finished_at: float | None = None
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _task: asyncio.Task | None = field(default=None, repr=False)

    @property
    def status(self) -> SessionStatus:
        return self.engine.status

    def summary(self) -> SessionSummary:
        return SessionSummary(
            session_id=self.session_id,
            status=self.engine.status,
            reason=self.engine.reason.value if self.engine.reason else None,
            length=self.engine.state.length,
            frame_ms=self.frame_ms,
        )


class SessionManager:
    """Central registry managing all hosted sessions."""

    def __init__(self, max_finished_sessions: int = _MAX_FINISHED_SESSIONS) -> None:
        if max_finished_sessions < 0:
            raise ValueError("max_finished_sessions must be >= 0.")
        self._sessions: dict[str, SessionInstance] = {}
        self._max_finished_sessions = max_finished_sessions

    def create_session(
        self,
        overrides: dict | None = None,
        frame_ms: int = 16,
        start: bool = True,
    ) -> SessionInstance:
        """Create a session and, unless *start* is False, its frame loop."""
        config = GameConfig().replace(**(overrides or {}))
        session_id = uuid.uuid4().hex[:12]
        instance = SessionInstance(
            session_id=session_id,
            engine=GameEngine(config),
            frame_ms=frame_ms,
        )
        self._sessions[session_id] = instance
        if start:
            instance._task = asyncio.create_task(self._frame_loop(instance))
        logger.info("Session %s created (frame %d ms).", session_id, frame_ms)
        return instance

    def get_session(self, session_id: str) -> SessionInstance | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[SessionSummary]:
        """Return summaries of running sessions."""
        return [
            s.summary() for s in self._sessions.values()
            if s.status == SessionStatus.RUNNING
        ]

    async def queue_direction(self, session_id: str, direction: Direction) -> None:
        """Record a key press to be fed into the next frame."""
        session = self._require(session_id)
        async with session.lock:
            if session.status == SessionStatus.RUNNING:
                session.pending.append(direction)

    async def quit_session(self, session_id: str) -> SessionInstance:
        """Terminate a session immediately."""
        session = self._require(session_id)
        async with session.lock:
            session.engine.quit()
            self._mark_finished(session)
        return session

    async def run_frame(self, session: SessionInstance, delta_ms: float) -> dict:
        """Feed queued input and *delta_ms* into the engine for one frame."""
        async with session.lock:
            directions, session.pending = session.pending, []
            state = session.engine.frame(delta_ms, directions)
            if session.engine.terminated:
                self._mark_finished(session)
        return state

    def _require(self, session_id: str) -> SessionInstance:
        session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        return session

    async def _frame_loop(self, session: SessionInstance) -> None:
        """Drive the engine with wall-clock deltas, broadcasting on change."""
        interval = session.frame_ms / 1000.0
        last = time.monotonic()
        last_key = None
        try:
            while session.status == SessionStatus.RUNNING:
                await asyncio.sleep(interval)
                now = time.monotonic()
                delta_ms, last = (now - last) * 1000.0, now
                state = await self.run_frame(session, delta_ms)
                key = (state["advances"], state["status"], str(state["food"]))
                if key != last_key:
                    last_key = key
                    await self._broadcast(session, state)
        except asyncio.CancelledError:
            logger.info("Frame loop cancelled for session %s.", session.session_id)
        except Exception:
            logger.exception("Frame loop error in session %s.", session.session_id)
            session.engine.quit()
            self._mark_finished(session)
        finally:
            if session.status == SessionStatus.TERMINATED:
                await self._broadcast(session, session.engine.get_state())
                await self._close_connections(session)
                self._prune_finished_sessions()

    def _mark_finished(self, session: SessionInstance) -> None:
        if session.finished_at is None:
            session.finished_at = time.monotonic()

    async def _broadcast(self, session: SessionInstance, state: dict) -> None:
        """Send the state to every connected socket, dropping dead ones."""
        payload = json.dumps(state, separators=(",", ":"))
        dead: list[WebSocket] = []
        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)
        for ws in dead:
            if ws in session.sockets:
                session.sockets.remove(ws)

    async def _close_connections(self, session: SessionInstance) -> None:
        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Session finished.")
            except Exception:
                logger.warning(
                    "Failed closing socket in session %s.", session.session_id,
                )
        session.sockets.clear()

    def _prune_finished_sessions(self) -> None:
        """Bound retained finished sessions to avoid unbounded registry growth."""
        finished = [
            s for s in self._sessions.values()
            if s.status == SessionStatus.TERMINATED
        ]
        overflow = len(finished) - self._max_finished_sessions
        if overflow <= 0:
            return
        finished.sort(
            key=lambda s: s.finished_at if s.finished_at is not None else s.created_at,
        )
        for stale in finished[:overflow]:
            self._sessions.pop(stale.session_id, None)
        logger.info(
            "Pruned %d finished sessions (retaining up to %d).",
            overflow, self._max_finished_sessions,
        )

    async def cleanup(self) -> None:
        """Cancel all running frame loops."""
        tasks = [
            s._task for s in self._sessions.values()
            if s._task and not s._task.done()
        ]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("SessionManager cleanup complete.")

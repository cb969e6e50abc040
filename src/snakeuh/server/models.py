"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from snakeuh.state import SessionStatus


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    width: int | None = Field(default=None, ge=3, le=201)
    height: int | None = Field(default=None, ge=3, le=201)
    default_step_ms: int | None = Field(default=None, ge=1, le=2000)
    min_step_ms: int | None = Field(default=None, ge=0, le=2000)
    step_decrement_ms: int | None = Field(default=None, ge=0, le=100)
    seed: int | None = None
    frame_ms: int = Field(default=16, ge=5, le=1000)


class SessionSummary(BaseModel):
    """Compact session info."""

    session_id: str
    status: SessionStatus
    reason: str | None
    length: int
    frame_ms: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str

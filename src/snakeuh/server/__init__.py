"""FastAPI host streaming one snake session per client."""

from snakeuh.server.app import create_app

__all__ = ["create_app"]

"""Common schemas used across services."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness response for the HTTP transport."""

    status: str = "ok"
    server: str

"""Health check response schema."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = "ok"

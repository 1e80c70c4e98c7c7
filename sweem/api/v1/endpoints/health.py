"""Health endpoints: liveness (no dependencies) and readiness (database reachable)."""

from fastapi import APIRouter

from sweem.api.v1.dependencies import ReadSession
from sweem.infrastructure.persistence.database import ping
from sweem.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable"}},
)
async def readiness_check(db: ReadSession) -> HealthResponse:
    """Return ok once the database answers a trivial query; 503 otherwise."""
    await ping(db)
    return HealthResponse()

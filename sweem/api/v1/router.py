"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Entity routes
share the bearer-token dependency; /auth and /health are public.
"""

from fastapi import APIRouter, Depends

from sweem.api.v1.dependencies import get_current_claims
from sweem.api.v1.endpoints import auth, clients, health, projects, users

_authenticated = [Depends(get_current_claims)]

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(
    clients.router, prefix="/clients", tags=["clients"], dependencies=_authenticated
)
api_router.include_router(
    projects.router, prefix="/projects", tags=["projects"], dependencies=_authenticated
)
api_router.include_router(
    users.router, prefix="/users", tags=["users"], dependencies=_authenticated
)

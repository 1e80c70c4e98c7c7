"""Auth API: login.

Any credential failure is a 401 with one generic message (no hint whether the
login exists).
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from sweem.api.v1.dependencies import get_auth_service
from sweem.application.services import AuthService
from sweem.schemas.auth import LoginRequest, TokenResponse

router = APIRouter()


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"description": "Invalid credentials"}},
)
async def login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Authenticate with login and password; return a JWT for the Authorization header."""
    token = await auth_service.login(body.login, body.password)
    return TokenResponse(token=token)

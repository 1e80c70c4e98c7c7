"""Auth API schemas."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Request body for login.

    No length or blank checks here: the login flow answers any unusable
    value with the same 401 as wrong credentials.
    """

    login: str
    password: str


class TokenResponse(BaseModel):
    """JWT access token response."""

    token: str

"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, services and authentication.
Services are built per request from a session and the process-wide,
immutable settings; routes depend only on these factories.

Read routes use get_db (no transaction); write routes use
get_db_transactional (commit on success, rollback on error or cancellation).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from sweem.application.dtos.token import TokenClaims
from sweem.application.interfaces import ITokenValidator
from sweem.application.services import (
    AuthService,
    ClientService,
    ProjectService,
    UserService,
)
from sweem.core.config import get_settings
from sweem.infrastructure.persistence.database import get_db, get_db_transactional
from sweem.infrastructure.persistence.repositories import (
    ClientRepository,
    ProjectRepository,
    UserRepository,
)
from sweem.infrastructure.security import (
    BcryptPasswordHasher,
    TokenIssuer,
    TokenValidator,
)

_http_bearer = HTTPBearer(auto_error=False)

ReadSession = Annotated[AsyncSession, Depends(get_db)]
WriteSession = Annotated[AsyncSession, Depends(get_db_transactional)]


# ---- Security components ----


@lru_cache
def _hasher_for_rounds(rounds: int) -> BcryptPasswordHasher:
    """One hasher per work factor so its dummy hash is computed once per process."""
    return BcryptPasswordHasher(rounds=rounds)


def get_password_hasher() -> BcryptPasswordHasher:
    return _hasher_for_rounds(get_settings().bcrypt_rounds)


def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return TokenIssuer(
        signing_key=settings.jwt_key.get_secret_value(),
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        lifetime=settings.access_token_lifetime,
    )


def get_token_validator() -> TokenValidator:
    settings = get_settings()
    return TokenValidator(
        signing_key=settings.jwt_key.get_secret_value(),
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )


# ---- Authentication ----


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    validator: Annotated[ITokenValidator, Depends(get_token_validator)],
) -> TokenClaims:
    """Return subject and role from the bearer token; 401 if missing or invalid."""
    if credentials is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return validator.validate(credentials.credentials)


# ---- Services ----


def get_auth_service(
    db: ReadSession,
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    return AuthService(UserRepository(db), hasher, issuer)


def get_client_service(db: ReadSession) -> ClientService:
    return ClientService(ClientRepository(db))


def get_client_service_for_write(db: WriteSession) -> ClientService:
    return ClientService(ClientRepository(db))


def get_project_service(db: ReadSession) -> ProjectService:
    return ProjectService(ProjectRepository(db), ClientRepository(db), UserRepository(db))


def get_project_service_for_write(db: WriteSession) -> ProjectService:
    return ProjectService(ProjectRepository(db), ClientRepository(db), UserRepository(db))


def get_user_service(
    db: ReadSession,
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    return UserService(UserRepository(db), hasher)


def get_user_service_for_write(
    db: WriteSession,
    hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    return UserService(UserRepository(db), hasher)

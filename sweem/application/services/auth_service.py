"""Login flow: credentials in, signed access token out.

Every failure (blank input, unknown login, wrong password) surfaces as the
same InvalidCredentialsException. For unknown logins a dummy bcrypt check
still runs so response time does not reveal whether the login exists.
"""

from __future__ import annotations

import asyncio
import logging

from sweem.application.dtos.user import UserResult
from sweem.application.interfaces.repositories import IUserRepository
from sweem.application.interfaces.services import IPasswordHasher, ITokenIssuer
from sweem.domain.enums import PasswordVerificationResult
from sweem.domain.exceptions import InvalidCredentialsException

logger = logging.getLogger(__name__)

# Longer values cannot belong to a stored user (see the user schemas).
MAX_LOGIN_LENGTH = 100
MAX_PASSWORD_LENGTH = 128


class AuthService:
    """Validate credentials against the user store and issue tokens."""

    def __init__(
        self,
        user_repo: IUserRepository,
        hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._token_issuer = token_issuer

    async def validate_credentials(self, login: str, password: str) -> UserResult | None:
        """Return the user whose login and password match, else None.

        Login matching is exact and case-sensitive.
        """
        if not login or not login.strip() or not password or not password.strip():
            return None
        if len(login) > MAX_LOGIN_LENGTH or len(password) > MAX_PASSWORD_LENGTH:
            return None
        found = await self._user_repo.get_credentials_by_login(login)
        if found is None:
            await asyncio.to_thread(self._hasher.verify_dummy, password)
            return None
        user, password_hash = found
        result = await asyncio.to_thread(self._hasher.verify, password_hash, password)
        if result is not PasswordVerificationResult.SUCCESS:
            return None
        return user

    async def login(self, login: str, password: str) -> str:
        """Return an access token for valid credentials.

        Raises:
            InvalidCredentialsException: For any failure, without saying which.
        """
        user = await self.validate_credentials(login, password)
        if user is None:
            logger.info("Login rejected")
            raise InvalidCredentialsException()
        logger.info("Login succeeded for user %s", user.id)
        return self._token_issuer.issue(user.id, user.role)

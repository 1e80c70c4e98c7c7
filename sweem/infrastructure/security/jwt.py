"""JWT access token issue and validation (python-jose, HS256).

Tokens carry iss, aud, iat, nbf, exp, sub (user id) and role (role name).
Validation checks signature, issuer, audience and expiry; every failure is
reported as the same InvalidTokenException so callers learn nothing about
which check failed. There is no revocation: validity is signature and time only.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any, cast
from uuid import UUID

from jose import JWTError, jwt

from sweem.application.dtos.token import TokenClaims
from sweem.domain.enums import Role
from sweem.domain.exceptions import InvalidTokenException

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ROLE_CLAIM = "role"
DEFAULT_LIFETIME = timedelta(hours=1)

_DECODE_OPTIONS = {
    "require_exp": True,
    "require_sub": True,
    "require_iss": True,
    "require_aud": True,
    "leeway": 0,
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenIssuer:
    """Builds signed access tokens.

    The signing key is validated (length) when settings load, not here.
    """

    def __init__(
        self,
        signing_key: str,
        issuer: str,
        audience: str,
        lifetime: timedelta = DEFAULT_LIFETIME,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the issuer.

        Args:
            signing_key: Symmetric HMAC key.
            issuer: Value of the iss claim.
            audience: Value of the aud claim.
            lifetime: Validity window from issuance (a zero or negative
                lifetime yields tokens that are already expired).
            clock: Returns the current UTC time; injectable for tests.
        """
        self._signing_key = signing_key
        self._issuer = issuer
        self._audience = audience
        self._lifetime = lifetime
        self._clock = clock

    def issue(self, subject_id: UUID, role: Role) -> str:
        """Return a compact HS256 JWT for subject_id with the role claim."""
        now = self._clock()
        claims: dict[str, Any] = {
            "iss": self._issuer,
            "aud": self._audience,
            "sub": str(subject_id),
            ROLE_CLAIM: Role(role).value,
            "iat": now,
            "nbf": now,
            "exp": now + self._lifetime,
        }
        encoded = jwt.encode(claims, self._signing_key, algorithm=ALGORITHM)
        return cast(str, encoded)


class TokenValidator:
    """Verifies tokens produced by TokenIssuer with the same key, issuer and audience."""

    def __init__(self, signing_key: str, issuer: str, audience: str) -> None:
        self._signing_key = signing_key
        self._issuer = issuer
        self._audience = audience

    def validate(self, token: str) -> TokenClaims:
        """Verify signature, issuer, audience and expiry; return subject and role.

        Raises:
            InvalidTokenException: If any check fails or required claims are
                missing or malformed.
        """
        try:
            payload = jwt.decode(
                token,
                self._signing_key,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options=_DECODE_OPTIONS,
            )
            return TokenClaims(
                subject_id=UUID(payload["sub"]),
                role=Role(payload[ROLE_CLAIM]),
            )
        except (JWTError, KeyError, ValueError, TypeError) as e:
            logger.debug("Token rejected: %s", type(e).__name__)
            raise InvalidTokenException() from None

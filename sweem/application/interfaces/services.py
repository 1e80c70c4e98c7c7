"""Service interfaces (ports) for password hashing and access tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from sweem.application.dtos.token import TokenClaims
    from sweem.domain.enums import PasswordVerificationResult, Role


class IPasswordHasher(Protocol):
    """Salted, slow one-way password hashing. Methods are CPU-bound and synchronous."""

    def hash(self, plaintext: str) -> str:
        """Return an opaque salted hash of plaintext."""

    def verify(self, hashed: str, plaintext: str) -> PasswordVerificationResult:
        """Check plaintext against a stored hash."""

    def verify_dummy(self, plaintext: str) -> PasswordVerificationResult:
        """Spend the same work as verify() against a throwaway hash; always FAILED."""


class ITokenIssuer(Protocol):
    """Issues signed, time-bounded access tokens."""

    def issue(self, subject_id: UUID, role: Role) -> str:
        """Return a compact signed token for the subject and role."""


class ITokenValidator(Protocol):
    """Validates access tokens issued by ITokenIssuer."""

    def validate(self, token: str) -> TokenClaims:
        """Return the token's claims. Raises InvalidTokenException on any failure."""

"""DTO for the identity carried by a validated access token."""

from dataclasses import dataclass
from uuid import UUID

from sweem.domain.enums import Role


@dataclass(frozen=True)
class TokenClaims:
    """Subject and role extracted from a token that passed validation."""

    subject_id: UUID
    role: Role

"""Domain enumerations for SWEeM.

Enums represent fixed sets of domain values (user role, password check outcome).
"""

from enum import Enum


class Role(str, Enum):
    """User role. The value is the role name carried in the JWT role claim."""

    ADMIN = "Admin"
    MANAGER = "Manager"
    MEMBER = "Member"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid role names.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [role.value for role in cls]


class PasswordVerificationResult(str, Enum):
    """Outcome of checking a plaintext password against a stored hash."""

    SUCCESS = "success"
    FAILED = "failed"

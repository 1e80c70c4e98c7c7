"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from sweem.domain.enums import PasswordVerificationResult, Role
from sweem.domain.exceptions import (
    ConfigurationException,
    InvalidCredentialsException,
    InvalidTokenException,
    LoginAlreadyExistsException,
    ResourceInUseException,
    ResourceNotFoundException,
    StorageException,
    SweemException,
    ValidationException,
)

__all__ = [
    # Enums
    "PasswordVerificationResult",
    "Role",
    # Exceptions
    "ConfigurationException",
    "InvalidCredentialsException",
    "InvalidTokenException",
    "LoginAlreadyExistsException",
    "ResourceInUseException",
    "ResourceNotFoundException",
    "StorageException",
    "SweemException",
    "ValidationException",
]

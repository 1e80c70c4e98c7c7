"""Domain exceptions for SWEeM.

Defines domain-level exceptions that represent business rule violations and
infrastructure faults surfaced to callers. Presentation layer maps them to
HTTP responses in exception handlers.

"Not found" is not an exception inside the services (they return None);
ResourceNotFoundException exists for the presentation layer only.
"""

from typing import Any


class SweemException(Exception):
    """Base exception for all SWEeM application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(SweemException):
    """Raised when input validation fails (e.g. invalid reference or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidCredentialsException(SweemException):
    """Raised when a login/password pair is rejected.

    Unknown login, wrong password and blank input all raise this with the
    same message so callers cannot enumerate logins.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials", "INVALID_CREDENTIALS")


class InvalidTokenException(SweemException):
    """Raised when a bearer token fails validation (any reason, undifferentiated)."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired token", "INVALID_TOKEN")


class ResourceNotFoundException(SweemException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'client', 'project').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class LoginAlreadyExistsException(SweemException):
    """Raised when creating or renaming a user to a login that is already taken."""

    def __init__(self) -> None:
        super().__init__("Login is already registered", "LOGIN_ALREADY_EXISTS")


class ResourceInUseException(SweemException):
    """Raised when deleting a record that other records still reference."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} is still referenced: {resource_id}",
            "RESOURCE_IN_USE",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class StorageException(SweemException):
    """Raised when the underlying store fails. Not retried; surfaced as 5xx."""

    def __init__(self, operation: str) -> None:
        """Initialize with the operation that failed.

        Args:
            operation: Short description (e.g. 'create client').
        """
        super().__init__(
            f"Storage failure during {operation}",
            "STORAGE_ERROR",
            {"operation": operation},
        )


class ConfigurationException(SweemException):
    """Raised at startup when required settings are missing or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "CONFIGURATION_ERROR")

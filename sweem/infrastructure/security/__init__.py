"""Security: bcrypt password hashing and JWT issue/validation."""

from sweem.infrastructure.security.jwt import TokenIssuer, TokenValidator
from sweem.infrastructure.security.password import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher", "TokenIssuer", "TokenValidator"]

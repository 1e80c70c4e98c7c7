"""Application ports: repository and service protocols implemented by infrastructure."""

from sweem.application.interfaces.repositories import (
    IClientRepository,
    IProjectRepository,
    IUserRepository,
)
from sweem.application.interfaces.services import (
    IPasswordHasher,
    ITokenIssuer,
    ITokenValidator,
)

__all__ = [
    "IClientRepository",
    "IPasswordHasher",
    "IProjectRepository",
    "ITokenIssuer",
    "ITokenValidator",
    "IUserRepository",
]

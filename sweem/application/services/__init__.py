"""Application services: entity CRUD with pagination, and the login flow."""

from sweem.application.services.auth_service import AuthService
from sweem.application.services.client_service import ClientService
from sweem.application.services.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from sweem.application.services.project_service import ProjectService
from sweem.application.services.user_service import UserService

__all__ = [
    "AuthService",
    "ClientService",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "ProjectService",
    "UserService",
]

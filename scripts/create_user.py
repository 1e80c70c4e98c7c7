"""Create a user directly in the database (bootstrap for the first admin).

Every entity route requires a token, so the first account has to be created
out of band.

Usage:
    python -m scripts.create_user <login> <name> [role] [password]
If password is omitted, a random one is printed. role defaults to Admin.
"""

import asyncio
import secrets
import sys

from sweem.application.dtos.user import UserCreate
from sweem.application.services import UserService
from sweem.core.config import get_settings
from sweem.domain.enums import Role
from sweem.domain.exceptions import SweemException
from sweem.infrastructure.persistence import database
from sweem.infrastructure.persistence.repositories import UserRepository
from sweem.infrastructure.security import BcryptPasswordHasher
from sweem.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def main() -> None:
    """Create the user; schema is created first if missing."""
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.create_user <login> <name> [role] [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    login = sys.argv[1]
    name = sys.argv[2]
    role_arg = sys.argv[3] if len(sys.argv) > 3 else Role.ADMIN.value
    password = sys.argv[4] if len(sys.argv) > 4 else secrets.token_urlsafe(12)
    if role_arg not in Role.values():
        print(f"Unknown role: {role_arg} (expected one of {Role.values()})", file=sys.stderr)
        sys.exit(1)

    settings = get_settings()
    setup_logging()
    await database.create_schema()
    assert database.AsyncSessionLocal is not None

    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                service = UserService(
                    UserRepository(session),
                    BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
                )
                user_id = await service.create(
                    UserCreate(name=name, login=login, password=password, role=Role(role_arg))
                )
    except SweemException as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        sys.exit(1)
    finally:
        await database.dispose_engine()

    logger.info("Created user %s", user_id)
    print(f"Created user: {user_id} ({login}, {role_arg})")
    print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())

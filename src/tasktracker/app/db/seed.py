"""Create the initial administrator account.

Run ``tasktracker-seed-admin`` once against a fresh database; ``--reset``
wipes every existing user first.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from ..core.config import get_settings
from ..core.logging import configure_logging
from ..models import User, UserRole
from ..repositories import UserRepository
from ..services import UserService
from .connection import close_database, init_database

logger = logging.getLogger(__name__)


async def seed_admin(*, reset: bool = False) -> User:
    """Ensure the configured admin exists, returning it."""

    settings = get_settings()
    repository = UserRepository()
    if reset:
        removed = await repository.delete_all()
        logger.warning("Removed existing users", extra={"count": removed})

    existing = await repository.get_by_email(settings.seed_admin_email)
    if existing is not None:
        logger.info("Admin already present", extra={"email": existing.email})
        return existing

    service = UserService(repository)
    return await service.create_user(
        email=settings.seed_admin_email,
        password=settings.seed_admin_password,
        role=UserRole.ADMIN,
    )


async def _run(reset: bool) -> None:
    await init_database(verify=True)
    try:
        await seed_admin(reset=reset)
    finally:
        await close_database()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the task tracker admin account.")
    parser.add_argument("--reset", action="store_true", help="delete all users before seeding")
    args = parser.parse_args(argv)

    configure_logging(get_settings())
    asyncio.run(_run(args.reset))


if __name__ == "__main__":
    main()

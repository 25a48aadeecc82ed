"""
Create or update an admin dashboard account.

Usage::

    tempo-create-admin <username> [password]

The password is prompted for when not given. If the username already exists
its password is replaced. The ``admin_users`` table must exist (run the
Alembic migrations first).
"""

from __future__ import annotations

import argparse
import asyncio
import getpass
import sys
from typing import Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tempo_gig_manager.core.database import async_session_maker
from tempo_gig_manager.core.database.entities import AdminUser
from tempo_gig_manager.core.database.repositories import build_sql_repos_from_session
from tempo_gig_manager.core.logging_config import get_logger, setup_logging
from tempo_gig_manager.core.security import hash_password

logger = get_logger(__name__)


async def create_admin(
    username: str,
    password: str,
    session_factory: async_sessionmaker[AsyncSession] = async_session_maker,
) -> Tuple[AdminUser, bool]:
    """Create an admin account or reset its password.

    Args:
        username: Admin username
        password: Plain-text password, stored hashed
        session_factory: Session factory of the target database

    Returns:
        Tuple of the account and whether it was newly created
    """
    async with session_factory() as session:
        repos = build_sql_repos_from_session(session=session)
        return await repos.admin_users.upsert(username, hash_password(password))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tempo-create-admin", description="Create or update an admin account")
    parser.add_argument("username", help="Admin username")
    parser.add_argument("password", nargs="?", help="Admin password (prompted when omitted)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console script entry point."""
    setup_logging(enable_file=False)
    args = _parse_args(argv)
    password = args.password or getpass.getpass("Password: ")
    if not password:
        logger.error("A non-empty password is required")
        return 1

    admin, created = asyncio.run(create_admin(args.username, password))
    if created:
        logger.info(f"Created admin user: {admin.username}")
    else:
        logger.info(f"Updated password for admin user: {admin.username}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Admin account repository.
"""

from __future__ import annotations

from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.admin_users import AdminUser
from .base import AsyncBaseRepository


class AdminUserRepository(AsyncBaseRepository[AdminUser]):
    """Repository for admin dashboard accounts."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AdminUser)

    async def get_by_username(self, username: str) -> Optional[AdminUser]:
        result = await self.session.execute(select(AdminUser).where(AdminUser.username == username))
        return result.scalar_one_or_none()

    async def upsert(self, username: str, password_hash: str) -> Tuple[AdminUser, bool]:
        """Create an admin account or reset the password of an existing one.

        Args:
            username: Admin username
            password_hash: Hashed password

        Returns:
            Tuple of the admin account and whether it was newly created
        """
        admin = await self.get_by_username(username)
        created = admin is None
        if admin is None:
            admin = AdminUser(username=username, password_hash=password_hash)
        else:
            admin.password_hash = password_hash
        return await self.create(admin), created

    async def touch_last_login(self, admin: AdminUser) -> AdminUser:
        admin.last_login = utc_now()
        return await self.create(admin)

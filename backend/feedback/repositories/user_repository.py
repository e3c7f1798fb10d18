"""Read access to the users table."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback.models.user import User


class UserRepository:

    async def find_one_by_login(self, db: AsyncSession, login: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.login == login))
        return result.scalar_one_or_none()


user_repository = UserRepository()

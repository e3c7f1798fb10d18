"""Caller-to-user resolution."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from feedback.exceptions import AuthenticationError
from feedback.models.user import User
from feedback.repositories.user_repository import user_repository

logger = logging.getLogger(__name__)


class UserService:

    async def find_one_by_login(self, db: AsyncSession, login: str) -> User:
        """
        The user row for `login`.

        Raises:
            AuthenticationError: the token names a login with no account
        """
        user = await user_repository.find_one_by_login(db, login)
        if user is None:
            logger.warning("Authenticated login %r has no user account", login)
            raise AuthenticationError(message=f"No account is registered for login '{login}'")
        return user


user_service = UserService()

"""
Feedback Tracker Backend — Points Routes
=========================================

What:  /api/points with role-dependent ownership rules.

Role policy (permissive: non-admins are scoped, never rejected):
    Create:  administrators may assign points to any user; for everyone
             else the owner is overwritten with the caller's own account,
             whatever userId the body carried.
    List:    administrators see every row, newest date first; everyone
             else sees only their own rows.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from feedback.descriptors import POINTS
from feedback.repositories.base import QueryScope
from feedback.routes.resource import CrudResource
from feedback.schemas.points import PointsDTO
from feedback.security import Caller
from feedback.services import points_service, user_service

logger = logging.getLogger(__name__)


class PointsResource(CrudResource):

    async def prepare_create(self, db: AsyncSession, dto: PointsDTO, caller: Caller) -> PointsDTO:
        if caller.is_admin:
            return dto
        logger.debug("No admin role, assigning points to current user: %s", caller.login)
        user = await user_service.find_one_by_login(db, caller.login)
        return dto.model_copy(update={"user_id": user.id})

    async def query_scope(self, db: AsyncSession, caller: Caller) -> QueryScope:
        if caller.is_admin:
            return QueryScope.newest_first()
        user = await user_service.find_one_by_login(db, caller.login)
        return QueryScope.owned_by(user.id)


resource = PointsResource(POINTS, points_service, tag="Points")
router = resource.build_router()

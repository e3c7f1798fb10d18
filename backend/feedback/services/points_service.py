"""
Feedback Tracker Backend — Points Service
==========================================

What:  EntityService for Points, plus get_points_list().
Why:   The points listing serves display DTOs derived from the raw rows
       rather than the plain page mapping the other entities use.
"""

import logging
from typing import Iterable, List

from sqlalchemy.ext.asyncio import AsyncSession

from feedback.descriptors import POINTS
from feedback.models.points import Points
from feedback.pagination import Page, PageRequest
from feedback.repositories.base import QueryScope
from feedback.schemas.points import PointsDTO
from feedback.services.entity_service import EntityService

logger = logging.getLogger(__name__)


class PointsService(EntityService[PointsDTO]):

    def __init__(self):
        super().__init__(POINTS)

    def get_points_list(self, records: Iterable[Points]) -> List[PointsDTO]:
        """
        Turn persisted point rows into the list served to clients.

        Each record becomes one display DTO, in the order given.
        """
        return [self.mapper.to_dto(record) for record in records]

    async def find_all(
        self,
        db: AsyncSession,
        request: PageRequest,
        scope: QueryScope = QueryScope(),
    ) -> Page[PointsDTO]:
        logger.debug("Request to get a page of points (scope=%s)", scope)
        page = await self._find_page(db, request, scope)
        return Page(
            content=self.get_points_list(page.content),
            request=page.request,
            total_elements=page.total_elements,
        )


points_service = PointsService()

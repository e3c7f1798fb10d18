"""
Feedback Tracker Backend — Generic Entity Service
==================================================

What:  Thin orchestration between the resources and the repository:
       save (upsert), find_all (paged), find_one, delete.
Why:   Keeps transaction-level rules (upsert semantics, DTO re-read after
       write, error translation) out of the HTTP layer.
How:   Stateless; each call receives the request's AsyncSession. Commit and
       rollback happen in feedback.database.get_db_session.

Upsert rules:
    dto.id is None                → INSERT, id assigned by the database
    dto.id names an existing row  → every submitted field overwrites the row
    dto.id names no row           → treated as a creation (new server-assigned id)

Absence is a value here, not an error: find_one returns None and delete of a
missing id removes nothing. The resources decide what HTTP status that means.
"""

import logging
from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from feedback.descriptors import EntityDescriptor
from feedback.exceptions import DatabaseError
from feedback.pagination import Page, PageRequest
from feedback.repositories.base import QueryScope
from feedback.schemas.base import EntityDTO

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=EntityDTO)


class EntityService(Generic[D]):
    """Service for the entity described by `descriptor`."""

    def __init__(self, descriptor: EntityDescriptor):
        self.descriptor = descriptor
        self.mapper = descriptor.mapper
        self.repository = descriptor.repository

    async def save(self, db: AsyncSession, dto: D) -> D:
        logger.debug("Request to save %s : %s", self.descriptor.entity_name, dto)
        entity = self.mapper.to_entity(dto)
        try:
            if entity.id is not None:
                existing = await self.repository.find_by_id(db, entity.id)
                if existing is not None:
                    self.mapper.copy_onto(entity, existing)
                    await db.flush()
                    entity = existing
                else:
                    logger.info(
                        "%s %s does not exist; creating a new row",
                        self.descriptor.entity_name, entity.id,
                    )
                    entity.id = None
                    entity = await self.repository.add(db, entity)
            else:
                entity = await self.repository.add(db, entity)

            # Re-read so the owner's login is joined in
            saved = await self.repository.find_by_id(db, entity.id)
        except SQLAlchemyError as e:
            logger.error("Database error saving %s: %s", self.descriptor.entity_name, str(e))
            raise DatabaseError(
                message=f"Could not save the {self.descriptor.entity_name}. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e
        return self.mapper.to_dto(saved)

    async def find_all(
        self,
        db: AsyncSession,
        request: PageRequest,
        scope: QueryScope = QueryScope(),
    ) -> Page[D]:
        logger.debug("Request to get a page of %s", self.descriptor.entity_name)
        page = await self._find_page(db, request, scope)
        return page.map(self.mapper.to_dto)

    async def find_one(self, db: AsyncSession, id: int) -> Optional[D]:
        logger.debug("Request to get %s : %s", self.descriptor.entity_name, id)
        try:
            entity = await self.repository.find_by_id(db, id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching %s %s: %s",
                         self.descriptor.entity_name, id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve the {self.descriptor.entity_name}. Please try again.",
                context={"id": id, "error_type": type(e).__name__},
            ) from e
        return self.mapper.to_dto(entity)

    async def delete(self, db: AsyncSession, id: int) -> None:
        logger.debug("Request to delete %s : %s", self.descriptor.entity_name, id)
        try:
            removed = await self.repository.delete_by_id(db, id)
        except SQLAlchemyError as e:
            logger.error("Database error deleting %s %s: %s",
                         self.descriptor.entity_name, id, str(e))
            raise DatabaseError(
                message=f"Could not delete the {self.descriptor.entity_name}. Please try again.",
                context={"id": id, "error_type": type(e).__name__},
            ) from e
        if not removed:
            logger.debug("%s %s was already absent", self.descriptor.entity_name, id)

    async def _find_page(self, db: AsyncSession, request: PageRequest, scope: QueryScope) -> Page:
        try:
            return await self.repository.find_page(db, request, scope)
        except SQLAlchemyError as e:
            logger.error("Database error listing %s: %s", self.descriptor.entity_name, str(e),
                         exc_info=True)
            raise DatabaseError(
                message=f"Could not retrieve {self.descriptor.collection}. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

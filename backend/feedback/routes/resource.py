"""
Feedback Tracker Backend — Generic CRUD Resource
=================================================

What:  Builds the five REST endpoints of one entity collection.
Why:   Blood pressure, points and weight expose exactly the same HTTP
       contract; only the entity descriptor and two policy hooks differ.
How:   CrudResource.build_router() returns an APIRouter whose handlers close
       over the descriptor's DTO class, so request bodies are validated and
       responses serialized with the right Pydantic model.

Endpoints (collection = descriptor.collection):
    POST   /api/{collection}        → 201 + Location, 400 if body has an id
    PUT    /api/{collection}        → 200, or the POST path when id is absent or unknown
    GET    /api/{collection}        → 200 + list, X-Total-Count and Link headers
    GET    /api/{collection}/{id}   → 200, or 404 with empty body (422 outside 1..2^63-1)
    DELETE /api/{collection}/{id}   → 200 with empty body

Policy hooks (overridden by PointsResource):
    prepare_create(db, dto, caller) → the DTO actually persisted on create
    query_scope(db, caller)         → the QueryScope applied to the listing
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.ext.asyncio import AsyncSession

from feedback.database import MAX_IDENTIFIER, get_db_session
from feedback.descriptors import EntityDescriptor
from feedback.exceptions import BadRequestAlertError, NotFoundError
from feedback.pagination import PageRequest, generate_pagination_headers, page_request_params
from feedback.repositories.base import QueryScope
from feedback.routes.alerts import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)
from feedback.schemas.base import EntityDTO
from feedback.schemas.common import ErrorResponse
from feedback.security import Caller, get_current_caller
from feedback.services.entity_service import EntityService

logger = logging.getLogger(__name__)


class CrudResource:
    """HTTP boundary for the entity described by `descriptor`."""

    def __init__(self, descriptor: EntityDescriptor, service: EntityService, tag: str):
        self.descriptor = descriptor
        self.service = service
        self.tag = tag

    @property
    def entity_name(self) -> str:
        return self.descriptor.entity_name

    # ── Policy hooks ──────────────────────────────────────────────────────

    async def prepare_create(self, db: AsyncSession, dto: EntityDTO, caller: Caller) -> EntityDTO:
        return dto

    async def query_scope(self, db: AsyncSession, caller: Caller) -> QueryScope:
        return QueryScope.everything()

    # ── Operations ────────────────────────────────────────────────────────

    async def create(
        self, db: AsyncSession, dto: EntityDTO, caller: Caller, response: Response
    ) -> EntityDTO:
        logger.debug("REST request to save %s : %s", self.entity_name, dto)
        if dto.id is not None:
            raise BadRequestAlertError(
                message=f"A new {self.entity_name} cannot already have an ID",
                entity_name=self.entity_name,
                error_key="idexists",
            )
        dto = await self.prepare_create(db, dto, caller)
        result = await self.service.save(db, dto)

        response.status_code = 201
        response.headers["Location"] = f"{self.descriptor.resource_url}/{result.id}"
        response.headers.update(entity_creation_alert(self.entity_name, result.id))
        return result

    async def update(
        self, db: AsyncSession, dto: EntityDTO, caller: Caller, response: Response
    ) -> EntityDTO:
        logger.debug("REST request to update %s : %s", self.entity_name, dto)
        if dto.id is None:
            return await self.create(db, dto, caller, response)
        if await self.service.find_one(db, dto.id) is None:
            logger.debug("%s %s does not exist; creating instead", self.entity_name, dto.id)
            return await self.create(db, dto.model_copy(update={"id": None}), caller, response)
        result = await self.service.save(db, dto)
        response.headers.update(entity_update_alert(self.entity_name, result.id))
        return result

    async def get_all(
        self, db: AsyncSession, request: PageRequest, caller: Caller, response: Response
    ) -> List[EntityDTO]:
        logger.debug("REST request to get a page of %s", self.descriptor.collection)
        scope = await self.query_scope(db, caller)
        page = await self.service.find_all(db, request, scope)
        response.headers.update(
            generate_pagination_headers(page, self.descriptor.resource_url)
        )
        return page.content

    async def get(self, db: AsyncSession, id: int) -> EntityDTO:
        logger.debug("REST request to get %s : %s", self.entity_name, id)
        dto = await self.service.find_one(db, id)
        if dto is None:
            raise NotFoundError(resource=self.entity_name, resource_id=id)
        return dto

    async def delete(self, db: AsyncSession, id: int) -> Response:
        logger.debug("REST request to delete %s : %s", self.entity_name, id)
        await self.service.delete(db, id)
        return Response(status_code=200, headers=entity_deletion_alert(self.entity_name, id))

    # ── Router ────────────────────────────────────────────────────────────

    def build_router(self) -> APIRouter:
        """Mount the operations above on /api/{collection}."""
        dto_class = self.descriptor.dto_class
        collection = f"/{self.descriptor.collection}"
        name = self.entity_name

        router = APIRouter(
            prefix="/api",
            tags=[self.tag],
            dependencies=[Depends(get_current_caller)],
            responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
        )

        @router.post(
            collection,
            response_model=dto_class,
            status_code=201,
            responses={400: {"description": "The body already carries an id"}},
            summary=f"Create a new {name}",
            name=f"create_{name}",
        )
        async def create_entity(
            dto: dto_class,
            response: Response,
            caller: Caller = Depends(get_current_caller),
            db: AsyncSession = Depends(get_db_session),
        ):
            return await self.create(db, dto, caller, response)

        @router.put(
            collection,
            response_model=dto_class,
            responses={201: {"description": "No id given; created instead", "model": dto_class}},
            summary=f"Update an existing {name}",
            name=f"update_{name}",
        )
        async def update_entity(
            dto: dto_class,
            response: Response,
            caller: Caller = Depends(get_current_caller),
            db: AsyncSession = Depends(get_db_session),
        ):
            return await self.update(db, dto, caller, response)

        @router.get(
            collection,
            response_model=List[dto_class],
            summary=f"Get a page of {self.descriptor.collection}",
            name=f"list_{name}",
        )
        async def list_entities(
            response: Response,
            request: PageRequest = Depends(page_request_params),
            caller: Caller = Depends(get_current_caller),
            db: AsyncSession = Depends(get_db_session),
        ):
            return await self.get_all(db, request, caller, response)

        @router.get(
            collection + "/{id}",
            response_model=dto_class,
            responses={404: {"description": f"No {name} with this id"}},
            summary=f"Get one {name}",
            name=f"get_{name}",
        )
        async def get_entity(
            id: int = Path(ge=1, le=MAX_IDENTIFIER),
            db: AsyncSession = Depends(get_db_session),
        ):
            return await self.get(db, id)

        @router.delete(
            collection + "/{id}",
            response_class=Response,
            summary=f"Delete one {name}",
            name=f"delete_{name}",
        )
        async def delete_entity(
            id: int = Path(ge=1, le=MAX_IDENTIFIER),
            db: AsyncSession = Depends(get_db_session),
        ):
            return await self.delete(db, id)

        return router

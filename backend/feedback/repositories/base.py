"""
Feedback Tracker Backend — Generic CRUD Repository
===================================================

What:  Async data access for one entity type: lookup by id, scoped page
       queries, insert/update, delete.
Why:   All three measurement tables share the same access patterns, so one
       parameterized repository replaces three hand-written ones.
How:   Every method takes the request's AsyncSession explicitly; the
       repository itself holds no session state and is safe to share.

Query Scope:
    Listing is a single parameterized query. What varies between callers is
    captured up front in a QueryScope value:

        QueryScope.everything()        → all rows
        QueryScope.newest_first()      → all rows, date DESC before any client sort
        QueryScope.owned_by(user_id)   → WHERE user_id = :user_id

    The resource computes the scope once per request from the caller's
    roles and hands it down; there is no separate "admin query" code path.
"""

import logging
from dataclasses import dataclass
from typing import Generic, List, Optional, Type, TypeVar

from pydantic.alias_generators import to_snake
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback.database import Base
from feedback.pagination import Page, PageRequest

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Base)


@dataclass(frozen=True)
class QueryScope:
    owner_id: Optional[int] = None
    order_by_date_desc: bool = False

    @classmethod
    def everything(cls) -> "QueryScope":
        return cls()

    @classmethod
    def newest_first(cls) -> "QueryScope":
        return cls(order_by_date_desc=True)

    @classmethod
    def owned_by(cls, user_id: int) -> "QueryScope":
        return cls(owner_id=user_id)


class CrudRepository(Generic[E]):
    """Persistence access for entity_class."""

    def __init__(self, entity_class: Type[E], owner_field: str = "user_id"):
        self.entity_class = entity_class
        self.owner_column = getattr(entity_class, owner_field)
        self._columns = set(entity_class.__table__.columns.keys())

    async def find_by_id(self, db: AsyncSession, id: int) -> Optional[E]:
        """
        Load one row with its owner joined, or None.

        populate_existing refreshes an instance already in the identity map,
        so the owner relation reflects a user_id changed earlier in the
        same session.
        """
        result = await db.execute(
            select(self.entity_class)
            .where(self.entity_class.id == id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()

    async def find_page(
        self,
        db: AsyncSession,
        request: PageRequest,
        scope: QueryScope = QueryScope(),
    ) -> Page[E]:
        query = select(self.entity_class)
        if scope.owner_id is not None:
            query = query.where(self.owner_column == scope.owner_id)

        order_by = []
        if scope.order_by_date_desc:
            order_by.append(self.entity_class.date.desc())
        for order in request.sort:
            column_name = to_snake(order.property)
            if column_name not in self._columns:
                logger.debug("Ignoring unknown sort property %r on %s",
                             order.property, self.entity_class.__name__)
                continue
            column = getattr(self.entity_class, column_name)
            order_by.append(column.desc() if order.descending else column.asc())
        # Tie-breaker keeps pages stable when the requested order has duplicates
        order_by.append(self.entity_class.id.asc())

        result = await db.execute(
            query.order_by(*order_by).offset(request.offset).limit(request.size)
        )
        content: List[E] = list(result.unique().scalars().all())

        total = await self.count(db, scope)
        return Page(content=content, request=request, total_elements=total)

    async def count(self, db: AsyncSession, scope: QueryScope = QueryScope()) -> int:
        query = select(func.count(self.entity_class.id))
        if scope.owner_id is not None:
            query = query.where(self.owner_column == scope.owner_id)
        result = await db.execute(query)
        return result.scalar() or 0

    async def add(self, db: AsyncSession, entity: E) -> E:
        """Insert a new row; the database assigns the id on flush."""
        db.add(entity)
        await db.flush()
        return entity

    async def delete_by_id(self, db: AsyncSession, id: int) -> int:
        """Delete by id; returns the number of rows removed (0 if absent)."""
        result = await db.execute(
            delete(self.entity_class).where(self.entity_class.id == id)
        )
        return result.rowcount

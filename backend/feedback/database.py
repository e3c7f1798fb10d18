"""
Feedback Tracker Backend — Database Session Management
=======================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling, provides a session
       dependency that auto-commits on success and auto-rolls-back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Transaction Model:
    One request = one session = one transaction. Every resource operation
    touches a single row, so the commit at the end of get_db_session is the
    only atomicity boundary this service needs.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy import BigInteger, Integer
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from feedback.config import settings


def _engine_options() -> Dict[str, Any]:
    """
    Pool options for the configured backend.

    SQLite (tests, local hacking) gets NullPool: aiosqlite connections are
    bound to the event loop that opened them, and pytest-asyncio gives every
    test its own loop.
    """
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if settings.is_sqlite:
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


engine = create_async_engine(settings.database_url, **_engine_options())

# expire_on_commit=False: DTOs are built from entities after the commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# 64-bit identifiers; SQLite only auto-increments INTEGER PRIMARY KEY columns
Identifier = BigInteger().with_variant(Integer, "sqlite")

# Largest value an Identifier column can hold
MAX_IDENTIFIER = 2**63 - 1


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Registers every model with a shared metadata object, which Alembic
    reads for migrations and the test suite uses for create_all().
    """
    pass


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handler
        5. Always: closes the session (returns connection to pool)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """Gracefully closes all connections in the pool (application shutdown)."""
    await engine.dispose()


class IdentityEqualityMixin:
    """
    Equality by database identity.

    Two instances are equal only when both carry the same non-null id; a
    transient instance (id still None) is equal to nothing but itself.
    """

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(type(self).__name__)

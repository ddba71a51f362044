"""Request-scoped dependencies for the LearnHub routers.

One engine (and connection pool) serves the whole process. Each request
gets its own ``AsyncSession`` wrapped in a ``SQLAlchemyRepositoryFactory``;
routers hand that factory to ``Command.from_factory`` /
``Query.from_factory`` and commit or roll back through ``factory.session``.
"""

from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from learnhub.infrastructure.persistence.sqlalchemy.init_db import build_engine
from learnhub.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide engine built from the settings on first use."""
    return build_engine()


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Open a session for the duration of one request."""
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]

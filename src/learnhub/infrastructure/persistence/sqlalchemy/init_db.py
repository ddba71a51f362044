"""Engine construction and schema management for the LearnHub tables."""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Registers users, categories and contents on Base.metadata
import learnhub.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import learnhub_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from learnhub.infrastructure.persistence.sqlalchemy.functions import (
    install_sqlite_functions,
)
from learnhub.infrastructure.persistence.sqlalchemy.models.base import Base
from learnhub_config.settings import get_settings

logger = logging.getLogger(__name__)


def build_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create an async engine for ``database_url`` (default: from settings).

    For a file-backed SQLite URL the parent directory is created first,
    since aiosqlite will not create it. SQLite engines also get the
    Unicode-aware ``learnhub_lower`` function.
    """
    url = make_url(database_url or get_settings().database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    engine = create_async_engine(url, echo=False, pool_pre_ping=True)
    install_sqlite_functions(engine)
    return engine


def describe_database_url(database_url: str) -> str:
    """Render a database URL with the password masked."""
    return make_url(database_url).render_as_string(hide_password=True)


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Create every missing table. Existing tables and rows are left alone.

    Parameters
    ----------
    engine
        Engine to run on. Without one, an engine is built from the settings
        and disposed again afterwards.
    """
    owned = engine is None
    engine = engine or build_engine()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))

    if owned:
        await engine.dispose()


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Drop every LearnHub table, data included."""
    owned = engine is None
    engine = engine or build_engine()

    logger.warning("Dropping tables: %s", ", ".join(sorted(Base.metadata.tables)))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    if owned:
        await engine.dispose()


async def reset_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Drop and recreate the schema on one engine."""
    owned = engine is None
    engine = engine or build_engine()
    try:
        await drop_tables(engine)
        await create_tables(engine)
    finally:
        if owned:
            await engine.dispose()

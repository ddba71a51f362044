"""LearnHub HTTP API.

``create_app`` wires the versioned routers, CORS and the error handlers
onto a FastAPI instance. Resource routes live under ``/api/v1``; ``/health``
and ``/`` stay unversioned.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learnhub.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    describe_database_url,
)
from learnhub.presentation.api.dependencies import get_engine
from learnhub.presentation.api.exception_handlers import setup_exception_handlers
from learnhub.presentation.api.routers import (
    categories_router,
    content_router,
    users_router,
)
from learnhub.presentation.api.schemas import HealthResponse
from learnhub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg", "httpx", "httpcore")


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Send LearnHub logs to stdout at ``level_name``; runs once per process."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for package in ("learnhub", "learnhub_identity"):
        logging.getLogger(package).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """Learner and author profiles.

**Lifecycle:**
- `DELETE /users/{id}` deactivates (soft delete); the record stays readable
- `POST /users/{id}/activate` reverses a deactivation
- `DELETE /users/{id}/permanent` removes the record

Emails are unique across all users, active or not.
""",
    },
    {
        "name": "Categories",
        "description": "Topics that learning content is filed under.",
    },
    {
        "name": "Content",
        "description": """Learning material.

**Types:** `text`, `video`, `quiz`, `interactive_lab` (case-insensitive).

**Rules checked on create/update:**
- the topic is an existing category id
- the title is unique (case-insensitive)
- on create, the creator is an existing, active user
""",
    },
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Info", "description": "Entry points of the API."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup and close the pool on shutdown."""
    engine = get_engine()
    logger.info(
        "LearnHub API %s starting on %s",
        API_VERSION,
        describe_database_url(str(engine.url)),
    )
    try:
        await create_tables(engine)
    except OSError:
        logger.critical("Database unreachable, aborting startup")
        raise SystemExit(1) from None

    yield

    await engine.dispose()
    logger.info("LearnHub API stopped, connection pool closed")


def create_v1_router() -> APIRouter:
    router = APIRouter()
    router.include_router(users_router, prefix="/users", tags=["Users"])
    router.include_router(categories_router, prefix="/categories", tags=["Categories"])
    router.include_router(content_router, prefix="/content", tags=["Content"])
    return router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Parameters
    ----------
    settings
        Settings to use instead of ``get_settings()`` (tests pass their own).
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    # Interactive docs only in debug mode
    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Users, categories and learning content for **LearnHub**.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="healthy", version=API_VERSION, api_versions=["v1"])

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """Where to find things."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
            "health": "/health",
            "resources": {
                name: f"{API_V1_PREFIX}/{name}"
                for name in ("users", "categories", "content")
            },
        }

    return app


app = create_app()

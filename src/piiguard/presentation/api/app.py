"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with:
    uvicorn piiguard.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from piiguard.presentation.api.config import get_api_settings
from piiguard.presentation.api.dependencies import create_tables, get_engine
from piiguard.presentation.api.exception_handlers import setup_exception_handlers
from piiguard.presentation.api.routers import auth_router, users_router
from piiguard_config.settings import Settings

logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Login and token issuance.

**Security:**
- Passwords are hashed with bcrypt
- Access tokens are HS256 JWTs valid for 24 hours
- Unknown email and wrong password return the same error
""",
    },
    {
        "name": "Users",
        "description": """User registration and lookup.

**Storage:**
- Email and name are encrypted at rest (AES-256-CBC, random IV)
- Email lookups use a keyed SHA-256 digest
- Responses never include password or hash fields
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up console output with timestamps and module names, the
    configured level for piiguard modules and WARNING for noisy
    third-party libraries.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("piiguard", "piiguard_auth", "piiguard_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. When given, every
        settings-dependent dependency resolves to it.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_api_settings()

    _configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
        engine = get_engine(settings.database_url)
        await create_tables(engine)
        yield

        logger.info("Shutting down %s API...", settings.app_name)
        await engine.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User registration and login with PII encrypted at rest.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.dependency_overrides[get_api_settings] = lambda: settings

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
    async def health_check() -> dict:
        """Health check endpoint. Unversioned for load balancers."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app

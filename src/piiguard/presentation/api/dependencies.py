"""FastAPI dependency injection for the PIIGuard API.

Provides dependencies for:
- Database sessions
- Service instances
- Authentication (token claims from the Bearer header)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from piiguard.application.factories import ServiceFactory
from piiguard.application.services import AuthenticationService, UserService
from piiguard.infrastructure.persistence.sqlalchemy import (
    Base,
    UserRepositorySQLAlchemy,
)
from piiguard.infrastructure.security import AesCbcFieldEncryptionService
from piiguard.presentation.api.config import get_api_settings
from piiguard_auth import (
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenClaims,
)
from piiguard_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=4)
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for a URL (singleton per URL).

    Returns
    -------
    AsyncEngine instance
    """
    # Ensure data directory exists for SQLite
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(database_url, echo=False, pool_pre_ping=True)


@lru_cache(maxsize=4)
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker for a URL (singleton per URL)."""
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(
    settings: SettingsDep,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Uncommitted work is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker(settings.database_url)() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine) -> None:
    """Create all database tables (idempotent)."""
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date")


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=4)
def _encryption_service_for(secret_key: str) -> AesCbcFieldEncryptionService:
    # Key derivation is deliberately slow; derive once per secret
    return AesCbcFieldEncryptionService(secret_key=secret_key)


def get_encryption_service(settings: SettingsDep) -> AesCbcFieldEncryptionService:
    """Get the field encryption service for the configured secret."""
    return _encryption_service_for(settings.crypto_secret_key.get_secret_value())


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_seconds=settings.access_token_expire_seconds,
    )


def get_service_factory(
    session: DBSession,
    encryption_service: AesCbcFieldEncryptionService = Depends(
        get_encryption_service,
    ),
    password_service: PasswordHashingService = Depends(get_password_service),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> ServiceFactory:
    """Assemble the request-scoped service factory."""
    return ServiceFactory(
        user_repository=UserRepositorySQLAlchemy(session),
        encryption_service=encryption_service,
        password_service=password_service,
        jwt_service=jwt_service,
    )


def get_user_service(
    factory: ServiceFactory = Depends(get_service_factory),
) -> UserService:
    return factory.user_service()


def get_authentication_service(
    factory: ServiceFactory = Depends(get_service_factory),
) -> AuthenticationService:
    return factory.authentication_service()


UserSvc = Annotated[UserService, Depends(get_user_service)]
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current Caller (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> TokenClaims:
    """
    FastAPI dependency returning the verified claims of the caller.

    Raises
    ------
    HTTPException
        401 if the Bearer token is missing, malformed, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


# Type alias for injected caller claims
CurrentClaims = Annotated[TokenClaims, Depends(get_current_claims)]

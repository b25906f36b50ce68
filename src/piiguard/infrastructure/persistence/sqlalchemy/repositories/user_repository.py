"""SQLAlchemy implementation of UserRepository."""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from piiguard.domain.shared.time import ensure_tz_aware, utc_now
from piiguard.domain.user import DuplicateUserError, NewUser, User, UserRepository
from piiguard.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    The session's transaction is owned by the caller. After a
    ``DuplicateUserError`` the caller must roll the session back.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email_hash(self, email_hash: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email_hash == email_hash)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_all(self) -> list[User]:
        result = await self._session.execute(select(UserModel))
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def create(self, fields: NewUser) -> User:
        now = utc_now()
        model = UserModel(
            id=uuid4(),
            email=fields.email,
            email_hash=fields.email_hash,
            name=fields.name,
            password_hash=fields.password_hash,
            created_at=now,
            updated_at=now,
        )

        try:
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as e:
            if "unique" in str(e).lower():
                raise DuplicateUserError(
                    details={"email_hash": fields.email_hash},
                ) from e
            raise

        logger.info("Created user: %s", model.id)
        return self._map_to_domain(model)

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            email_hash=model.email_hash,
            name=model.name,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

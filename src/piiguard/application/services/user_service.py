"""User service for registration and decrypted reads."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from uuid import UUID

from piiguard.application.dtos import UserView
from piiguard.domain.user import DuplicateUserError, NewUser, User, UserNotFoundError

if TYPE_CHECKING:
    from piiguard.domain.security import FieldEncryptionService
    from piiguard.domain.user import UserRepository
    from piiguard_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user records.

    Encrypts email and name before they reach the repository and
    decrypts them again on every read, so callers only ever see
    plaintext. Password hashes never leave this service.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        encryption_service: FieldEncryptionService,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._encryption = encryption_service
        self._password_service = password_service

    async def register(self, email: str, password: str, name: str) -> UserView:
        email_hash = self._encryption.hash_for_search(email)
        existing_user = await self._user_repo.find_by_email_hash(email_hash)
        if existing_user is not None:
            raise DuplicateUserError

        password_hash = await asyncio.to_thread(self._password_service.hash, password)

        user = await self._user_repo.create(
            NewUser(
                email=self._encryption.encrypt(email),
                email_hash=email_hash,
                name=self._encryption.encrypt(name),
                password_hash=password_hash,
            ),
        )

        logger.info("User registered: %s", user.id)
        return self._to_view(user)

    async def get_by_id(self, user_id: UUID) -> UserView:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return self._to_view(user)

    async def list_all(self) -> list[UserView]:
        users = await self._user_repo.find_all()
        return [self._to_view(user) for user in users]

    def _to_view(self, user: User) -> UserView:
        return UserView(
            id=user.id,
            email=self._encryption.decrypt(user.email),
            name=self._encryption.decrypt(user.name),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

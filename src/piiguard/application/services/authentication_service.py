"""Authentication service for login and token verification."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from piiguard.application.dtos import TokenResponse
from piiguard_auth import InvalidCredentialsError, TokenClaims

if TYPE_CHECKING:
    from piiguard.domain.security import FieldEncryptionService
    from piiguard.domain.user import UserRepository
    from piiguard_auth import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Login runs lookup by search digest, password verification, claim
    decryption and token signing, in that order. An unknown email and a
    wrong password both end in the same ``InvalidCredentialsError``.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        encryption_service: FieldEncryptionService,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._encryption = encryption_service
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def sign_in(self, email: str, password: str) -> TokenResponse:
        email_hash = self._encryption.hash_for_search(email)
        user = await self._user_repo.find_by_email_hash(email_hash)
        if user is None:
            logger.info("Login rejected: unknown email")
            raise InvalidCredentialsError

        is_valid = await asyncio.to_thread(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not is_valid:
            logger.info("Login rejected: wrong password for user %s", user.id)
            raise InvalidCredentialsError

        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=self._encryption.decrypt(user.email),
            name=self._encryption.decrypt(user.name),
        )

        logger.info("User logged in: %s", user.id)
        return TokenResponse(
            access_token=access_token,
            expires_in=self._jwt_service.access_token_expire_seconds,
        )

    def verify_token(self, token: str) -> TokenClaims:
        return self._jwt_service.verify_token(token)

"""Explicit assembly of application services.

Dependency order: repository -> encryption / password hashing / JWT ->
UserService -> AuthenticationService. Nothing here reads the environment;
secrets arrive through ``Settings``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from piiguard.application.services import AuthenticationService, UserService
from piiguard.infrastructure.security import AesCbcFieldEncryptionService
from piiguard_auth import JWTService, PasswordHashingService

if TYPE_CHECKING:
    from piiguard.domain.security import FieldEncryptionService
    from piiguard.domain.user import UserRepository
    from piiguard_config import Settings


def create_encryption_service(settings: Settings) -> AesCbcFieldEncryptionService:
    return AesCbcFieldEncryptionService(
        secret_key=settings.crypto_secret_key.get_secret_value(),
    )


def create_password_service(settings: Settings) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def create_jwt_service(settings: Settings) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_seconds=settings.access_token_expire_seconds,
    )


class ServiceFactory:
    """Builds the application services around one repository.

    Examples
    --------
    >>> factory = ServiceFactory.from_settings(settings, user_repository)
    >>> view = await factory.user_service().register("a@b.com", "pw", "A")
    """

    def __init__(
        self,
        user_repository: UserRepository,
        encryption_service: FieldEncryptionService,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repository = user_repository
        self._encryption_service = encryption_service
        self._password_service = password_service
        self._jwt_service = jwt_service

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        user_repository: UserRepository,
    ) -> ServiceFactory:
        return cls(
            user_repository=user_repository,
            encryption_service=create_encryption_service(settings),
            password_service=create_password_service(settings),
            jwt_service=create_jwt_service(settings),
        )

    def user_service(self) -> UserService:
        return UserService(
            user_repository=self._user_repository,
            encryption_service=self._encryption_service,
            password_service=self._password_service,
        )

    def authentication_service(self) -> AuthenticationService:
        return AuthenticationService(
            user_repository=self._user_repository,
            encryption_service=self._encryption_service,
            password_service=self._password_service,
            jwt_service=self._jwt_service,
        )

"""Unit tests for service assembly."""

from pydantic import SecretStr

from piiguard.application.factories import (
    ServiceFactory,
    create_encryption_service,
    create_jwt_service,
    create_password_service,
)
from piiguard.application.services import AuthenticationService, UserService
from piiguard_config import Settings
from tests.shared.fixtures.repositories import InMemoryUserRepository


def _settings(**overrides) -> Settings:
    values = {
        "jwt_secret_key": SecretStr("factory-jwt-secret"),
        "crypto_secret_key": SecretStr("factory-crypto-secret"),
        "password_hash_rounds": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestServiceCreation:
    def test_encryption_service_uses_crypto_secret(self):
        settings = _settings()
        service = create_encryption_service(settings)

        other = create_encryption_service(
            _settings(crypto_secret_key=SecretStr("factory-crypto-secret")),
        )
        assert other.hash_for_search("a@b.com") == service.hash_for_search("a@b.com")
        assert other.decrypt(service.encrypt("Al")) == "Al"

    def test_password_service_uses_configured_rounds(self):
        service = create_password_service(_settings(password_hash_rounds=5))

        assert service.hash("secret1").split("$")[2] == "05"

    def test_jwt_service_uses_configured_expiry(self):
        service = create_jwt_service(_settings(access_token_expire_seconds=120))

        assert service.access_token_expire_seconds == 120


class TestServiceFactory:
    def test_from_settings_builds_services(self):
        factory = ServiceFactory.from_settings(_settings(), InMemoryUserRepository())

        assert isinstance(factory.user_service(), UserService)
        assert isinstance(factory.authentication_service(), AuthenticationService)

    async def test_services_share_repository(self):
        """A user registered through one service can sign in through the other."""
        factory = ServiceFactory.from_settings(_settings(), InMemoryUserRepository())

        view = await factory.user_service().register("a@b.com", "secret1", "Al")
        token = await factory.authentication_service().sign_in("a@b.com", "secret1")

        claims = factory.authentication_service().verify_token(token.access_token)
        assert claims.subject == str(view.id)

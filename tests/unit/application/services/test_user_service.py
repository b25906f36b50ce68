"""Unit tests for UserService."""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from piiguard.application.services import UserService
from piiguard.domain.security import DecryptionError, FieldEncryptionService
from piiguard.domain.user import DuplicateUserError, UserNotFoundError, UserRepository
from piiguard.infrastructure.security import AesCbcFieldEncryptionService
from piiguard_auth import PasswordHashingService, WeakPasswordError
from tests.shared.fixtures.repositories import InMemoryUserRepository

TEST_SECRET = "user-service-test-secret"  # NOQA: S105


@pytest.fixture(scope="module")
def encryption_service() -> AesCbcFieldEncryptionService:
    return AesCbcFieldEncryptionService(secret_key=TEST_SECRET)


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def service(repository, encryption_service, password_service) -> UserService:
    return UserService(
        user_repository=repository,
        encryption_service=encryption_service,
        password_service=password_service,
    )


class TestRegister:
    """Tests for user registration."""

    async def test_register_returns_plaintext_view(self, service):
        view = await service.register("a@b.com", "secret1", "Al")

        assert view.email == "a@b.com"
        assert view.name == "Al"
        assert view.id is not None
        assert view.created_at == view.updated_at
        assert not hasattr(view, "password_hash")
        assert not hasattr(view, "email_hash")

    async def test_stored_record_is_encrypted(
        self,
        service,
        repository,
        encryption_service,
    ):
        """Email and name are stored as envelopes, the password as bcrypt."""
        view = await service.register("a@b.com", "secret1", "Al")

        stored = await repository.find_by_id(view.id)
        assert stored.email != "a@b.com"
        assert stored.name != "Al"
        assert encryption_service.decrypt(stored.email) == "a@b.com"
        assert encryption_service.decrypt(stored.name) == "Al"
        assert stored.email_hash == encryption_service.hash_for_search("a@b.com")
        assert stored.password_hash.startswith("$2")
        assert stored.password_hash != "secret1"

    async def test_password_hash_verifies(self, service, repository, password_service):
        view = await service.register("a@b.com", "secret1", "Al")

        stored = await repository.find_by_id(view.id)
        assert password_service.verify("secret1", stored.password_hash)

    async def test_duplicate_email_raises(self, service, repository):
        await service.register("a@b.com", "secret1", "Al")

        with pytest.raises(DuplicateUserError) as exc_info:
            await service.register("a@b.com", "other-password", "Bob")

        assert exc_info.value.message == "User already exists"
        assert len(await repository.find_all()) == 1

    async def test_email_comparison_is_exact(self, service, repository):
        """Emails differing only in case are different users."""
        await service.register("a@b.com", "secret1", "Al")
        await service.register("A@b.com", "secret1", "Al")

        assert len(await repository.find_all()) == 2

    async def test_empty_password_raises(self, service, repository):
        with pytest.raises(WeakPasswordError):
            await service.register("a@b.com", "", "Al")

        assert await repository.find_all() == []

    async def test_duplicate_check_precedes_hashing(self, encryption_service):
        """A known email is rejected before any password work happens."""
        existing = Mock()
        repository = AsyncMock(spec=UserRepository)
        repository.find_by_email_hash.return_value = existing
        password_service = Mock(spec=PasswordHashingService)

        service = UserService(repository, encryption_service, password_service)

        with pytest.raises(DuplicateUserError):
            await service.register("a@b.com", "secret1", "Al")

        password_service.hash.assert_not_called()
        repository.create.assert_not_called()

    async def test_repository_conflict_propagates(self, encryption_service):
        """A concurrent insert that loses the uniqueness race surfaces as duplicate."""
        repository = AsyncMock(spec=UserRepository)
        repository.find_by_email_hash.return_value = None
        repository.create.side_effect = DuplicateUserError()

        service = UserService(
            repository,
            encryption_service,
            PasswordHashingService(rounds=4),
        )

        with pytest.raises(DuplicateUserError):
            await service.register("a@b.com", "secret1", "Al")


class TestGetById:
    """Tests for single-user lookup."""

    async def test_get_existing_user(self, service):
        created = await service.register("a@b.com", "secret1", "Al")

        view = await service.get_by_id(created.id)

        assert view == created

    async def test_unknown_id_raises(self, service):
        user_id = uuid4()

        with pytest.raises(UserNotFoundError) as exc_info:
            await service.get_by_id(user_id)

        assert exc_info.value.message == "User not found"
        assert exc_info.value.details == {"user_id": str(user_id)}

    async def test_undecryptable_record_raises(self, repository, password_service):
        """A record encrypted under another key is an integrity failure."""
        writer = UserService(
            repository,
            AesCbcFieldEncryptionService(secret_key="previous-secret"),
            password_service,
        )
        created = await writer.register("a@b.com", "secret1", "Al")

        reader = UserService(
            repository,
            Mock(spec=FieldEncryptionService, decrypt=Mock(side_effect=DecryptionError("x"))),
            password_service,
        )

        with pytest.raises(DecryptionError):
            await reader.get_by_id(created.id)


class TestListAll:
    """Tests for listing users."""

    async def test_empty_repository(self, service):
        assert await service.list_all() == []

    async def test_lists_all_decrypted(self, service):
        await service.register("a@b.com", "secret1", "Al")
        await service.register("c@d.com", "secret2", "Cy")

        views = await service.list_all()

        assert sorted((v.email, v.name) for v in views) == [
            ("a@b.com", "Al"),
            ("c@d.com", "Cy"),
        ]

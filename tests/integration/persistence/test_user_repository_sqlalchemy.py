"""Integration tests for UserRepositorySQLAlchemy."""

from datetime import timezone
from uuid import uuid4

import pytest

from piiguard.domain.user import DuplicateUserError, NewUser
from piiguard.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy

pytestmark = pytest.mark.integration


def _new_user(email_hash: str = "a" * 64, **overrides) -> NewUser:
    values = {
        "email": "00112233445566778899aabbccddeeff:0123",
        "email_hash": email_hash,
        "name": "ffeeddccbbaa99887766554433221100:4567",
        "password_hash": "$2b$04$" + "x" * 53,
    }
    values.update(overrides)
    return NewUser(**values)


class TestCreate:
    async def test_create_assigns_id_and_timestamps(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        user = await repo.create(_new_user())

        assert user.id is not None
        assert user.created_at == user.updated_at
        assert user.created_at.tzinfo is not None
        assert user.email == "00112233445566778899aabbccddeeff:0123"
        assert user.password_hash.startswith("$2b$04$")

    async def test_create_generates_unique_ids(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        first = await repo.create(_new_user("a" * 64))
        second = await repo.create(_new_user("b" * 64))

        assert first.id != second.id

    async def test_duplicate_email_hash_raises(self, db_session):
        """The storage-level uniqueness constraint surfaces as DuplicateUserError."""
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.create(_new_user("a" * 64))
        await db_session.commit()

        with pytest.raises(DuplicateUserError) as exc_info:
            await repo.create(_new_user("a" * 64, name="other"))

        assert exc_info.value.details == {"email_hash": "a" * 64}

    async def test_committed_user_survives_duplicate_rollback(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.create(_new_user("a" * 64))
        await db_session.commit()

        with pytest.raises(DuplicateUserError):
            await repo.create(_new_user("a" * 64))
        await db_session.rollback()

        assert len(await repo.find_all()) == 1


class TestFind:
    async def test_find_by_email_hash(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        created = await repo.create(_new_user("a" * 64))

        found = await repo.find_by_email_hash("a" * 64)

        assert found == created

    async def test_find_by_email_hash_missing(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        assert await repo.find_by_email_hash("f" * 64) is None

    async def test_find_by_id(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        created = await repo.create(_new_user())

        found = await repo.find_by_id(created.id)

        assert found is not None
        assert found.id == created.id
        assert found.email_hash == created.email_hash

    async def test_find_by_id_missing(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        assert await repo.find_by_id(uuid4()) is None

    async def test_find_all(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        assert await repo.find_all() == []

        await repo.create(_new_user("a" * 64))
        await repo.create(_new_user("b" * 64))

        users = await repo.find_all()
        assert sorted(u.email_hash for u in users) == ["a" * 64, "b" * 64]

    async def test_read_back_from_new_session(self, session_maker):
        """Timestamps come back timezone-aware after a round trip through SQLite."""
        async with session_maker() as session:
            created = await UserRepositorySQLAlchemy(session).create(_new_user())
            await session.commit()

        async with session_maker() as session:
            found = await UserRepositorySQLAlchemy(session).find_by_id(created.id)

        assert found is not None
        assert found.created_at.tzinfo == timezone.utc
        assert found.created_at == created.created_at

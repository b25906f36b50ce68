"""User repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from piiguard.domain.user.user import NewUser, User


class UserRepository(ABC):
    """
    Repository interface for stored users.

    Implementations MUST enforce uniqueness of ``email_hash`` in storage
    and raise ``DuplicateUserError`` from ``create`` when it is violated.
    The service-level existence check alone is not atomic against
    concurrent registrations.
    """

    @abstractmethod
    async def find_by_email_hash(self, email_hash: str) -> User | None:
        """Find a user by the search digest of their email."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find a user by their ID."""

    @abstractmethod
    async def find_all(self) -> list[User]:
        """List all users, in no guaranteed order."""

    @abstractmethod
    async def create(self, fields: NewUser) -> User:
        """
        Persist a new user and return the stored record.

        Raises
        ------
        DuplicateUserError
            If a user with the same ``email_hash`` already exists
        """

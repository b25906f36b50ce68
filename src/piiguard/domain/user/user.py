"""User records as stored by the repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class NewUser:
    """Fields persisted on registration.

    ``email`` and ``name`` are encryption envelopes, never plaintext.
    """

    email: str
    email_hash: str
    name: str
    password_hash: str


@dataclass(frozen=True)
class User:
    """Immutable user record returned by the repository.

    ``email`` and ``name`` hold encryption envelopes. The timestamps are
    set by the persistence layer.
    """

    id: UUID
    email: str
    email_hash: str
    name: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def __repr__(self) -> str:
        return f"User(id={self.id})"

"""User view returned to callers."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserView:
    """Decrypted, caller-facing view of a user.

    Carries plaintext email and name. Never carries the password hash
    or the search digest.
    """

    id: UUID
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

"""User domain - stored identity records with encrypted PII.

Design notes:
- User ID is a random UUID4 generated at creation (opaque, immutable)
- Email and name are stored as encryption envelopes
- email_hash is the deterministic lookup key for the email and is unique
- Repository interface defined here, implementation in infrastructure
"""

from piiguard.domain.user.exceptions import DuplicateUserError, UserNotFoundError
from piiguard.domain.user.repository import UserRepository
from piiguard.domain.user.user import NewUser, User

__all__ = [
    "DuplicateUserError",
    "NewUser",
    "User",
    "UserNotFoundError",
    "UserRepository",
]

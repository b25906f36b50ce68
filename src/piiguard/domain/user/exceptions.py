"""User domain exceptions.

Messages are stable and never contain PII.
"""

from typing import Any

from piiguard.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class DuplicateUserError(ConflictError):
    """A user with the same email is already registered."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            "User already exists",
            code=ErrorCode.USER_ALREADY_EXISTS,
            details=details,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )

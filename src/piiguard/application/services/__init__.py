"""Application services."""

from piiguard.application.services.authentication_service import (
    AuthenticationService,
)
from piiguard.application.services.user_service import UserService

__all__ = [
    "AuthenticationService",
    "UserService",
]

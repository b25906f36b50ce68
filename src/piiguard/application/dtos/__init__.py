"""Data transfer objects returned by application services."""

from piiguard.application.dtos.auth_dto import TokenResponse
from piiguard.application.dtos.user_dto import UserView

__all__ = [
    "TokenResponse",
    "UserView",
]

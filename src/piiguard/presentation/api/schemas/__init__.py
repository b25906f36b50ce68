"""Pydantic request/response schemas."""

from piiguard.presentation.api.schemas.auth import LoginRequest, TokenResponse
from piiguard.presentation.api.schemas.users import CreateUserRequest, UserResponse

__all__ = [
    "CreateUserRequest",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
]

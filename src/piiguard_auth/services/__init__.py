"""Auth services: password hashing and JWT handling."""

from piiguard_auth.services.jwt_service import JWTService
from piiguard_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]

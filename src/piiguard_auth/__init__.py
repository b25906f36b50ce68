"""PIIGuard Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of any specific application domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    piiguard_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from piiguard_auth import PasswordHashingService, JWTService
"""

from piiguard_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidHashFormatError,
    InvalidTokenError,
    WeakPasswordError,
)
from piiguard_auth.schemas import TokenClaims
from piiguard_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenClaims",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidHashFormatError",
    "InvalidTokenError",
    "WeakPasswordError",
]

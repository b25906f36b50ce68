"""Security domain service interfaces."""

from piiguard.domain.security.services.encryption_service import (
    FieldEncryptionService,
)

__all__ = ["FieldEncryptionService"]

"""Security infrastructure implementations."""

from piiguard.infrastructure.security.encryption_service_aes import (
    AesCbcFieldEncryptionService,
)

__all__ = ["AesCbcFieldEncryptionService"]

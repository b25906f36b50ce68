"""Security domain: field encryption contract and its failures."""

from piiguard.domain.security.exceptions import (
    DecryptionError,
    EncryptionError,
    MalformedEnvelopeError,
    SecurityDomainError,
)
from piiguard.domain.security.services import FieldEncryptionService

__all__ = [
    "DecryptionError",
    "EncryptionError",
    "FieldEncryptionService",
    "MalformedEnvelopeError",
    "SecurityDomainError",
]

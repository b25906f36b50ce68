"""Security domain exceptions.

These signal corrupted storage or a key mismatch, never bad user input.
"""


class SecurityDomainError(Exception):
    """Base exception for security domain."""


class EncryptionError(SecurityDomainError):
    """Raised when encryption fails."""


class MalformedEnvelopeError(SecurityDomainError):
    """Raised when a stored value is not an ``<ivhex>:<cipherhex>`` envelope."""


class DecryptionError(SecurityDomainError):
    """Raised when an envelope cannot be decrypted (wrong key, tampered data)."""

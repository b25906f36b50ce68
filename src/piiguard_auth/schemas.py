"""Auth schemas and data structures.

These are simple data classes used for transferring auth
data between components.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Decoded access token payload.

    This represents the data extracted from a verified JWT token. The
    email and name are the plaintext values at issuance time, so consumers
    never need a second decrypt call.

    Attributes
    ----------
    subject
        The user id the token was issued for
    email
        The user's plaintext email address
    name
        The user's plaintext display name
    issued_at
        Token issuance timestamp (whole seconds)
    expires_at
        Token expiration timestamp
    """

    subject: str
    email: str
    name: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at

"""Token response returned on successful login."""

from dataclasses import dataclass

BEARER_TOKEN_TYPE = "Bearer"


@dataclass(frozen=True)
class TokenResponse:
    access_token: str
    expires_in: int
    token_type: str = BEARER_TOKEN_TYPE

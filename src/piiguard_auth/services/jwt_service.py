"""JWT token service.

Provides signing and verification of access tokens carrying the
plaintext identity claims of a user.
"""

from datetime import datetime, timedelta, timezone

import jwt

from piiguard_auth.exceptions import InvalidTokenError
from piiguard_auth.schemas import TokenClaims


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are signed with HMAC-SHA256 and carry the claims
    ``sub``, ``email``, ``name``, ``iat`` and ``exp``.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id, "user@example.com", "User")
    >>> claims = service.verify_token(token)
    >>> print(claims.subject)
    """

    DEFAULT_ACCESS_EXPIRE_SECONDS = 86400
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_seconds: int = DEFAULT_ACCESS_EXPIRE_SECONDS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_seconds
            Seconds until an access token expires (default 24 hours)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(seconds=access_token_expire_seconds)

    @property
    def access_token_expire_seconds(self) -> int:
        return int(self._access_expire.total_seconds())

    def create_access_token(
        self,
        user_id: object,
        email: str,
        name: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token.

        Parameters
        ----------
        user_id
            The user's unique identifier (stringified into ``sub``)
        email
            The user's plaintext email address
        name
            The user's plaintext name
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = int(datetime.now(tz=timezone.utc).timestamp())
        expire = now + int((expires_delta or self._access_expire).total_seconds())

        payload = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenClaims:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenClaims containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "iat", "exp"]},
            )

            return TokenClaims(
                subject=payload["sub"],
                email=payload["email"],
                name=payload["name"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

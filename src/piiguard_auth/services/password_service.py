"""Password hashing service using bcrypt.

Provides salted, adaptive password hashing and verification.
"""

import bcrypt

from piiguard_auth.exceptions import InvalidHashFormatError, WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt with a fixed work factor. Hashes are self-describing
    (``$2b$<cost>$<salt><digest>``), so verification needs nothing but
    the stored string.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    # bcrypt only consumes the first 72 bytes of its input
    MAX_PASSWORD_BYTES = 72
    DEFAULT_ROUNDS = 10

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Higher values
            are more secure but slower.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Every call uses a fresh random salt, so hashing the same password
        twice yields two different strings that both verify.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        InvalidHashFormatError
            If ``password_hash`` is not a structurally valid bcrypt hash
        """
        password_bytes = password.encode("utf-8")
        if len(password_bytes) > self.MAX_PASSWORD_BYTES:
            # Could never have been produced by hash()
            return False

        try:
            return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
        except ValueError as e:
            raise InvalidHashFormatError from e

    def validate_strength(self, password: str) -> None:
        """Validate that a password can be hashed.

        Current requirements:
        - Not empty
        - At most 72 bytes once UTF-8 encoded

        Parameters
        ----------
        password
            The password to validate

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_PASSWORD_BYTES:
            msg = f"Password cannot exceed {self.MAX_PASSWORD_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash was produced with a different work factor.

        Parameters
        ----------
        password_hash
            The existing hash to check

        Returns
        -------
        True if the hash should be regenerated
        """
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                current_rounds = int(parts[2])
                return current_rounds != self._rounds
        except (ValueError, IndexError):
            pass
        return True

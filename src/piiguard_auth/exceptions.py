"""Authentication exceptions.

These exceptions are raised by the piiguard_auth package and should be
caught and handled by the application layer (AuthenticationService).
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password cannot be hashed under the password policy."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    The message is deliberately the same for an unknown email and a wrong
    password.
    """

    def __init__(self, message: str = "Email or password is incorrect"):
        super().__init__(message)


class InvalidHashFormatError(AuthError):
    """Raised when a stored password hash is not a valid bcrypt hash."""

    def __init__(self, message: str = "Stored password hash is malformed"):
        super().__init__(message)

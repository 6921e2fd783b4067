"""Credential exceptions.

These exceptions are raised by the agronom_auth package and should be
caught and handled by the application layer (agronom_identity).
"""


class AuthError(Exception):
    """Base exception for all credential errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class CredentialHashingError(AuthError):
    """Raised when hashing or verification fails for reasons other than input."""

    def __init__(self, message: str = "Credential hashing failed"):
        super().__init__(message)

"""Account directory exceptions.

These exceptions are raised by the agronom_identity operations. Each one
carries a stable ``code`` that a transport layer can map to its own status
codes and messages; ``run_operation`` turns them into tagged results.
"""


class IdentityError(Exception):
    """Base exception for all account directory failures."""

    code = "identity_error"

    def __init__(self, message: str = "Identity error"):
        self.message = message
        super().__init__(self.message)


class MissingFieldError(IdentityError):
    """Raised when a required input is absent or blank."""

    code = "missing_field"

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Missing required field: {field}")


class InvalidFormatError(IdentityError):
    """Raised when an input is present but malformed."""

    code = "invalid_format"

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Invalid format: {field}")


class WeakSecretError(InvalidFormatError):
    """Raised when a secret doesn't meet the length policy."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__("secret", message)


class InvalidCredentialsError(IdentityError):
    """Raised when identifier or secret is incorrect during login.

    Unknown accounts and wrong secrets share this error and its message.
    """

    code = "invalid_credentials"

    def __init__(self, message: str = "Invalid identifier or password"):
        super().__init__(message)


class DuplicateAccountError(IdentityError):
    """Raised when an account with the same provider identity already exists."""

    code = "duplicate_account"

    def __init__(self, message: str = "Account already exists"):
        super().__init__(message)


class InternalError(IdentityError):
    """Raised on unexpected store or hashing faults.

    The message is generic and the cause is chained for logging.
    ``retryable`` marks faults where repeating the call is expected to
    succeed (e.g. a lost race on first federated sign-in).
    """

    code = "internal_error"

    def __init__(
        self,
        message: str = "Internal server error",
        retryable: bool = False,
    ):
        self.retryable = retryable
        super().__init__(message)

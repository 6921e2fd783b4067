"""Agronom Identity - Account registration, login and federated sign-in.

This package owns the account directory:
- Account aggregate and repository contract (domain)
- Register / authenticate / federated identify-or-create (application)
- SQLAlchemy account store (infrastructure)
- Admin CLI (presentation)

Password hashing lives in agronom_auth; configuration in agronom_config.
"""

from agronom_identity.domain.account import (
    Account,
    AccountAlreadyExistsError,
    AccountRepository,
    AccountStoreError,
    AuthProvider,
    InvalidAccountError,
)
from agronom_identity.exceptions import (
    DuplicateAccountError,
    IdentityError,
    InternalError,
    InvalidCredentialsError,
    InvalidFormatError,
    MissingFieldError,
    WeakSecretError,
)
from agronom_identity.services import (
    EmailOrPhoneValidator,
    IdentifierValidator,
    StrictEmailOrPhoneValidator,
    get_identifier_validator,
)
from agronom_identity.application import (  # noqa: I001
    AccountDirectory,
    AccountResult,
    OperationResult,
    run_operation,
)

__all__ = [
    # Domain - Account
    "Account",
    "AccountAlreadyExistsError",
    "AccountRepository",
    "AccountStoreError",
    "AuthProvider",
    "InvalidAccountError",
    # Exceptions
    "DuplicateAccountError",
    "IdentityError",
    "InternalError",
    "InvalidCredentialsError",
    "InvalidFormatError",
    "MissingFieldError",
    "WeakSecretError",
    # Services
    "EmailOrPhoneValidator",
    "IdentifierValidator",
    "StrictEmailOrPhoneValidator",
    "get_identifier_validator",
    # Application
    "AccountDirectory",
    "AccountResult",
    "OperationResult",
    "run_operation",
]

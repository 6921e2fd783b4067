"""Agronom Auth - Credential hashing.

This package provides the credential primitives that are independent of
how accounts are stored. It handles:
- Password hashing and verification (bcrypt)
- Password strength validation

Architecture:
    agronom_auth/
    ├── services/           # Pure logic (password hashing)
    └── exceptions.py       # Credential exceptions

Usage:
    from agronom_auth import PasswordHashingService

    hasher = PasswordHashingService(rounds=10)
    digest = hasher.hash("secret1")
    hasher.verify("secret1", digest)
"""

from agronom_auth.exceptions import (
    AuthError,
    CredentialHashingError,
    WeakPasswordError,
)
from agronom_auth.services import PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    # Exceptions
    "AuthError",
    "CredentialHashingError",
    "WeakPasswordError",
]

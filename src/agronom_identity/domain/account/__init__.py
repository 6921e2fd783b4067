"""Account domain manages local and federated identities.

This domain handles:
- Account aggregate (id, identifier, provider, provider_id, credential hash)
- Provider tags (local, google, apple)
- The repository contract the account directory depends on
"""

from agronom_identity.domain.account.aggregates import Account
from agronom_identity.domain.account.exceptions import (
    AccountAlreadyExistsError,
    AccountStoreError,
    InvalidAccountError,
)
from agronom_identity.domain.account.repositories import AccountRepository
from agronom_identity.domain.account.value_objects import AuthProvider

__all__ = [
    "Account",
    "AccountAlreadyExistsError",
    "AccountRepository",
    "AccountStoreError",
    "AuthProvider",
    "InvalidAccountError",
]

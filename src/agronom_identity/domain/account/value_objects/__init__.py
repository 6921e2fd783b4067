"""Value objects for the account domain."""

from agronom_identity.domain.account.value_objects.auth_provider import AuthProvider

__all__ = [
    "AuthProvider",
]

from enum import Enum


class AuthProvider(str, Enum):
    """How an account authenticates (password or a federated sign-in)."""

    LOCAL = "local"
    GOOGLE = "google"
    APPLE = "apple"

    @property
    def is_federated(self) -> bool:
        return self is not AuthProvider.LOCAL

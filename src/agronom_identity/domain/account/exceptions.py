"""Account domain exceptions.

Raised by repository implementations; the application layer translates
them into the public failures in agronom_identity.exceptions.
"""


class AccountAlreadyExistsError(Exception):
    """An account with the same (provider, provider_id) is already stored."""

    def __init__(self, provider: str, provider_id: str) -> None:
        self.provider = provider
        self.provider_id = provider_id
        super().__init__(f"Account already exists for provider {provider}")


class AccountStoreError(Exception):
    """The account store failed for a reason other than a uniqueness conflict."""

    def __init__(self, message: str = "Account store failure") -> None:
        super().__init__(message)


class InvalidAccountError(ValueError):
    """Raised when an account's provider and credential hash don't agree."""

    def __init__(self, message: str) -> None:
        super().__init__(message)

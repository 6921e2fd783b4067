"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from agronom_identity.domain.account.aggregates.account import Account
from agronom_identity.domain.account.value_objects import AuthProvider


class AccountRepository(ABC):
    """Repository interface for Account aggregates.

    Every method is a single atomic interaction with the store.
    Implementations raise ``AccountStoreError`` for store faults.
    """

    @abstractmethod
    async def insert(self, account: Account) -> Account:
        """Persist a new account and return it with its store-assigned id.

        Raises ``AccountAlreadyExistsError`` if (provider, provider_id) is
        already taken; nothing is written in that case.
        """

    @abstractmethod
    async def find_by_provider(
        self,
        provider: Union[str, AuthProvider],
        provider_id: str,
    ) -> Optional[Account]:
        """Find the account bound to a provider identity."""

    async def find_local(self, identifier: str) -> Optional[Account]:
        """Find the local (password) account for an identifier."""
        return await self.find_by_provider(AuthProvider.LOCAL, identifier)

    @abstractmethod
    async def find_by_id(self, account_id: int) -> Optional[Account]:
        """Find an account by its id."""

    @abstractmethod
    async def count(self) -> int:
        """Count stored accounts."""

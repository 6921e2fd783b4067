"""Account aggregate: a local (password) or federated identity."""

from datetime import datetime
from typing import Optional, Union

from agronom_identity.domain.account.exceptions import InvalidAccountError
from agronom_identity.domain.account.value_objects import AuthProvider


class Account:
    """
    Account aggregate root.

    ``id`` is assigned by the store and stays ``None`` until the account
    has been persisted. ``provider`` and ``provider_id`` identify the
    account and never change; a credential hash exists only for local
    accounts.
    """

    def __init__(  # noqa: PLR0913
        self,
        identifier: str,
        provider: Union[str, AuthProvider],
        provider_id: str,
        credential_hash: Optional[str] = None,
        display_name: Optional[str] = None,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
    ):
        provider = provider if isinstance(provider, AuthProvider) else AuthProvider(provider)

        if provider is AuthProvider.LOCAL and not credential_hash:
            msg = "Local accounts require a credential hash"
            raise InvalidAccountError(msg)
        if provider.is_federated and credential_hash is not None:
            msg = f"{provider.value} accounts cannot carry a credential hash"
            raise InvalidAccountError(msg)
        if not provider_id:
            msg = "provider_id is required"
            raise InvalidAccountError(msg)

        self._id = id
        self._identifier = identifier
        self._provider = provider
        self._provider_id = provider_id
        self._credential_hash = credential_hash
        self._display_name = display_name
        self._created_at = created_at

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def provider(self) -> AuthProvider:
        return self._provider

    @property
    def provider_id(self) -> str:
        return self._provider_id

    @property
    def credential_hash(self) -> Optional[str]:
        return self._credential_hash

    @property
    def display_name(self) -> Optional[str]:
        return self._display_name

    @property
    def created_at(self) -> Optional[datetime]:
        return self._created_at

    @property
    def is_local(self) -> bool:
        return self._provider is AuthProvider.LOCAL

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @classmethod
    def create_local(
        cls,
        identifier: str,
        credential_hash: str,
        display_name: Optional[str] = None,
    ) -> "Account":
        """New password account; the identifier doubles as provider_id."""
        return cls(
            identifier=identifier,
            provider=AuthProvider.LOCAL,
            provider_id=identifier,
            credential_hash=credential_hash,
            display_name=display_name,
        )

    @classmethod
    def create_federated(
        cls,
        provider: Union[str, AuthProvider],
        provider_id: str,
        email: str,
        display_name: Optional[str] = None,
    ) -> "Account":
        """New federated account without a credential hash."""
        return cls(
            identifier=email,
            provider=provider,
            provider_id=provider_id,
            credential_hash=None,
            display_name=display_name or "",
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        identifier: str,
        provider: Union[str, AuthProvider],
        provider_id: str,
        credential_hash: Optional[str],
        display_name: Optional[str],
        created_at: Optional[datetime] = None,
    ) -> "Account":
        return cls(
            id=id,
            identifier=identifier,
            provider=provider,
            provider_id=provider_id,
            credential_hash=credential_hash,
            display_name=display_name,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((self._provider, self._provider_id))

    def __repr__(self) -> str:
        # credential_hash never appears in reprs or logs
        return (
            f"Account(id={self._id}, provider={self._provider.value}, "
            f"identifier={self._identifier})"
        )

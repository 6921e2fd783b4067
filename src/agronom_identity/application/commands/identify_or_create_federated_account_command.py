"""Sign in through a federated provider, creating the account on first contact."""

from __future__ import annotations

import logging
from typing import Optional, Union

from agronom_identity.application.commands._inputs import optional_text, require_text
from agronom_identity.application.results import AccountResult
from agronom_identity.domain.account import (
    Account,
    AccountAlreadyExistsError,
    AccountRepository,
    AccountStoreError,
    AuthProvider,
)
from agronom_identity.exceptions import (
    InternalError,
    InvalidFormatError,
    MissingFieldError,
)

logger = logging.getLogger(__name__)


class IdentifyOrCreateFederatedAccountCommand:
    """Idempotent upsert keyed by (provider, provider_id).

    The first call for a provider identity creates an account without a
    credential hash; every later call returns the same id. When two first
    calls race, the store's unique constraint lets one insert through and
    the other re-reads the winner's account.
    """

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    async def execute(
        self,
        provider: Union[str, AuthProvider, None],
        provider_id: Optional[str],
        email: Optional[str],
        display_name: Optional[str] = None,
    ) -> AccountResult:
        resolved_provider = self._resolve_provider(provider)
        provider_id = require_text(provider_id, "provider_id")
        email = require_text(email, "email")

        existing = await self._find(resolved_provider, provider_id)
        if existing is not None:
            return AccountResult(account_id=existing.id)

        account = Account.create_federated(
            provider=resolved_provider,
            provider_id=provider_id,
            email=email,
            display_name=optional_text(display_name),
        )

        try:
            stored = await self._account_repo.insert(account)
        except AccountAlreadyExistsError:
            logger.debug(
                "Concurrent first sign-in for %s account, re-reading",
                resolved_provider.value,
            )
            winner = await self._find(resolved_provider, provider_id)
            if winner is None:
                msg = "Account creation conflicted, please retry"
                raise InternalError(msg, retryable=True) from None
            return AccountResult(account_id=winner.id)
        except AccountStoreError as e:
            raise InternalError from e

        logger.info(
            "Created %s account on first sign-in: %s",
            resolved_provider.value,
            stored.id,
        )
        return AccountResult(account_id=stored.id, created=True)

    async def _find(self, provider: AuthProvider, provider_id: str) -> Optional[Account]:
        try:
            return await self._account_repo.find_by_provider(provider, provider_id)
        except AccountStoreError as e:
            raise InternalError from e

    @staticmethod
    def _resolve_provider(provider: Union[str, AuthProvider, None]) -> AuthProvider:
        if provider is None or provider == "":
            raise MissingFieldError("provider")

        try:
            resolved = AuthProvider(provider)
        except ValueError:
            msg = f"Unsupported provider: {provider}"
            raise InvalidFormatError("provider", msg) from None

        if not resolved.is_federated:
            msg = "Local accounts sign in with a password"
            raise InvalidFormatError("provider", msg)
        return resolved

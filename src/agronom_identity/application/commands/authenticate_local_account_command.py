"""Authenticate a local account with its password."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from agronom_auth import CredentialHashingError, PasswordHashingService
from agronom_identity.application.commands._inputs import require_secret, require_text
from agronom_identity.application.results import AccountResult
from agronom_identity.domain.account import AccountRepository, AccountStoreError
from agronom_identity.exceptions import InternalError, InvalidCredentialsError
from agronom_identity.services import canonical_identifier

logger = logging.getLogger(__name__)


class AuthenticateLocalAccountCommand:
    """Match an identifier/password pair against the stored hash.

    Unknown identifiers, accounts without a hash and wrong passwords all
    raise the same ``InvalidCredentialsError``. Unknown identifiers still
    pay for one bcrypt verification so response times match.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        password_service: PasswordHashingService,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service

    async def execute(
        self,
        identifier: Optional[str],
        secret: Optional[str],
    ) -> AccountResult:
        identifier = canonical_identifier(require_text(identifier, "identifier"))
        secret = require_secret(secret)

        try:
            account = await self._account_repo.find_local(identifier)
        except AccountStoreError as e:
            raise InternalError from e

        if account is None or not account.credential_hash:
            await self._verify(secret, self._password_service.dummy_hash())
            raise InvalidCredentialsError

        if not await self._verify(secret, account.credential_hash):
            logger.debug("Password mismatch for account: %s", account.id)
            raise InvalidCredentialsError

        return AccountResult(account_id=account.id)

    async def _verify(self, secret: str, credential_hash: str) -> bool:
        try:
            return await asyncio.to_thread(
                self._password_service.verify,
                secret,
                credential_hash,
            )
        except CredentialHashingError as e:
            raise InternalError from e

"""Register a password (local) account."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from agronom_auth import CredentialHashingError, PasswordHashingService, WeakPasswordError
from agronom_identity.application.commands._inputs import (
    optional_text,
    require_secret,
    require_text,
)
from agronom_identity.application.results import AccountResult
from agronom_identity.domain.account import (
    Account,
    AccountAlreadyExistsError,
    AccountRepository,
    AccountStoreError,
)
from agronom_identity.exceptions import (
    DuplicateAccountError,
    InternalError,
    InvalidFormatError,
    WeakSecretError,
)
from agronom_identity.services import (
    EmailOrPhoneValidator,
    IdentifierValidator,
    canonical_identifier,
)

logger = logging.getLogger(__name__)


class RegisterLocalAccountCommand:
    """Create a local account from an email/phone identifier and a password.

    Checks run in a fixed order and all of them before the store is touched:
    presence, identifier format, password length. The identifier is unique
    per provider, so a second registration of the same identifier fails
    with ``DuplicateAccountError``. Phone numbers are stored as bare digits,
    so different spellings of one number are the same identifier.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        password_service: PasswordHashingService,
        identifier_validator: Optional[IdentifierValidator] = None,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service
        self._identifier_validator = identifier_validator or EmailOrPhoneValidator()

    async def execute(
        self,
        identifier: Optional[str],
        secret: Optional[str],
        display_name: Optional[str] = None,
    ) -> AccountResult:
        identifier = require_text(identifier, "identifier")
        secret = require_secret(secret)

        if not self._identifier_validator.is_valid(identifier):
            msg = "Identifier must be an email address or a phone number"
            raise InvalidFormatError("identifier", msg)
        identifier = canonical_identifier(identifier)

        try:
            self._password_service.validate_strength(secret)
        except WeakPasswordError as e:
            raise WeakSecretError(e.message) from e

        try:
            credential_hash = await asyncio.to_thread(
                self._password_service.hash,
                secret,
            )
        except CredentialHashingError as e:
            raise InternalError from e

        account = Account.create_local(
            identifier=identifier,
            credential_hash=credential_hash,
            display_name=optional_text(display_name),
        )

        try:
            stored = await self._account_repo.insert(account)
        except AccountAlreadyExistsError as e:
            raise DuplicateAccountError from e
        except AccountStoreError as e:
            raise InternalError from e

        logger.info("Registered local account: %s", stored.id)
        return AccountResult(account_id=stored.id, created=True)

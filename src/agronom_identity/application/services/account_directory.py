"""Account directory: the three account operations behind one object."""

from __future__ import annotations

from typing import Optional, Union

from agronom_auth import PasswordHashingService
from agronom_config import Settings, get_settings
from agronom_identity.application.commands import (
    AuthenticateLocalAccountCommand,
    IdentifyOrCreateFederatedAccountCommand,
    RegisterLocalAccountCommand,
)
from agronom_identity.application.results import AccountResult
from agronom_identity.domain.account import AccountRepository, AuthProvider
from agronom_identity.services import (
    EmailOrPhoneValidator,
    IdentifierValidator,
    get_identifier_validator,
)


class AccountDirectory:
    """Register, authenticate and federate accounts.

    All collaborators are injected; nothing here reaches for a global
    connection. Build one per unit of work, or share it: the commands
    hold no per-request state.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        password_service: PasswordHashingService,
        identifier_validator: Optional[IdentifierValidator] = None,
    ):
        validator = identifier_validator or EmailOrPhoneValidator()
        self._register = RegisterLocalAccountCommand(
            account_repo=account_repository,
            password_service=password_service,
            identifier_validator=validator,
        )
        self._authenticate = AuthenticateLocalAccountCommand(
            account_repo=account_repository,
            password_service=password_service,
        )
        self._identify_or_create = IdentifyOrCreateFederatedAccountCommand(
            account_repo=account_repository,
        )

    @classmethod
    def from_settings(
        cls,
        account_repository: AccountRepository,
        settings: Optional[Settings] = None,
    ) -> AccountDirectory:
        settings = settings or get_settings()
        return cls(
            account_repository=account_repository,
            password_service=PasswordHashingService(
                rounds=settings.bcrypt_rounds,
                min_length=settings.password_min_length,
            ),
            identifier_validator=get_identifier_validator(
                settings.identifier_validation,
            ),
        )

    async def register(
        self,
        identifier: Optional[str],
        secret: Optional[str],
        display_name: Optional[str] = None,
    ) -> AccountResult:
        return await self._register.execute(identifier, secret, display_name)

    async def authenticate(
        self,
        identifier: Optional[str],
        secret: Optional[str],
    ) -> AccountResult:
        return await self._authenticate.execute(identifier, secret)

    async def identify_or_create(
        self,
        provider: Union[str, AuthProvider, None],
        provider_id: Optional[str],
        email: Optional[str],
        display_name: Optional[str] = None,
    ) -> AccountResult:
        return await self._identify_or_create.execute(
            provider,
            provider_id,
            email,
            display_name,
        )

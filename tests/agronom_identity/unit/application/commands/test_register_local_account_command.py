"""Unit tests for RegisterLocalAccountCommand."""

from unittest.mock import AsyncMock, Mock

import pytest

from agronom_auth import CredentialHashingError, PasswordHashingService
from agronom_identity import (
    Account,
    AccountAlreadyExistsError,
    AccountRepository,
    AccountStoreError,
    AuthProvider,
    DuplicateAccountError,
    InternalError,
    InvalidFormatError,
    MissingFieldError,
    WeakSecretError,
)
from agronom_identity.application.commands import RegisterLocalAccountCommand

TEST_IDENTIFIER = "a@b.com"
TEST_SECRET = "secret1"


def _stored(account: Account, account_id: int = 1) -> Account:
    return Account.reconstitute(
        id=account_id,
        identifier=account.identifier,
        provider=account.provider,
        provider_id=account.provider_id,
        credential_hash=account.credential_hash,
        display_name=account.display_name,
    )


class TestRegisterLocalAccountCommand:
    """Tests for the happy path and store outcomes."""

    def setup_method(self):
        """Set up test fixtures."""
        self.account_repo = AsyncMock(spec=AccountRepository)
        self.account_repo.insert.side_effect = _stored
        self.password_service = PasswordHashingService(rounds=4)
        self.command = RegisterLocalAccountCommand(
            account_repo=self.account_repo,
            password_service=self.password_service,
        )

    @pytest.mark.asyncio
    async def test_register_success(self):
        """Registers a local account and returns its id."""
        result = await self.command.execute(TEST_IDENTIFIER, TEST_SECRET, "Al")

        assert result.account_id == 1
        assert result.created is True

        inserted = self.account_repo.insert.call_args[0][0]
        assert inserted.provider is AuthProvider.LOCAL
        assert inserted.provider_id == TEST_IDENTIFIER
        assert inserted.display_name == "Al"
        assert inserted.credential_hash != TEST_SECRET
        assert self.password_service.verify(TEST_SECRET, inserted.credential_hash)

    @pytest.mark.asyncio
    async def test_register_without_display_name(self):
        """Display name is optional."""
        await self.command.execute(TEST_IDENTIFIER, TEST_SECRET)

        inserted = self.account_repo.insert.call_args[0][0]
        assert inserted.display_name is None

    @pytest.mark.asyncio
    async def test_register_trims_identifier(self):
        """Surrounding whitespace is not part of the identifier."""
        await self.command.execute("  a@b.com ", TEST_SECRET)

        inserted = self.account_repo.insert.call_args[0][0]
        assert inserted.identifier == "a@b.com"
        assert inserted.provider_id == "a@b.com"

    @pytest.mark.asyncio
    async def test_register_phone_identifier(self):
        """Phone numbers are accepted as identifiers."""
        result = await self.command.execute("+7 (999) 123-45-67", TEST_SECRET)

        assert result.account_id == 1

    @pytest.mark.asyncio
    async def test_register_stores_phone_as_digits(self):
        """Separators and the leading plus are not part of the stored phone."""
        await self.command.execute("+7 (999) 123-45-67", TEST_SECRET)

        inserted = self.account_repo.insert.call_args[0][0]
        assert inserted.identifier == "79991234567"
        assert inserted.provider_id == "79991234567"

    @pytest.mark.asyncio
    async def test_register_result_has_no_secret_or_hash(self):
        """The result only carries the id."""
        result = await self.command.execute(TEST_IDENTIFIER, TEST_SECRET)

        inserted = self.account_repo.insert.call_args[0][0]
        assert TEST_SECRET not in repr(result)
        assert inserted.credential_hash not in repr(result)

    @pytest.mark.asyncio
    async def test_register_duplicate(self):
        """A uniqueness conflict surfaces as DuplicateAccountError."""
        self.account_repo.insert.side_effect = AccountAlreadyExistsError(
            "local",
            TEST_IDENTIFIER,
        )

        with pytest.raises(DuplicateAccountError) as exc_info:
            await self.command.execute(TEST_IDENTIFIER, TEST_SECRET)

        assert exc_info.value.code == "duplicate_account"

    @pytest.mark.asyncio
    async def test_register_store_failure_is_internal(self):
        """Store faults become a generic InternalError."""
        self.account_repo.insert.side_effect = AccountStoreError(
            "SQLITE_IOERR: disk I/O error",
        )

        with pytest.raises(InternalError) as exc_info:
            await self.command.execute(TEST_IDENTIFIER, TEST_SECRET)

        assert "SQLITE" not in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, AccountStoreError)

    @pytest.mark.asyncio
    async def test_register_hashing_failure_is_internal(self):
        """Hashing faults become InternalError without touching the store."""
        password_service = Mock(spec=PasswordHashingService)
        password_service.hash.side_effect = CredentialHashingError
        command = RegisterLocalAccountCommand(self.account_repo, password_service)

        with pytest.raises(InternalError):
            await command.execute(TEST_IDENTIFIER, TEST_SECRET)

        self.account_repo.insert.assert_not_called()


class TestRegisterLocalAccountValidation:
    """Input checks run in order and never reach the store."""

    def setup_method(self):
        """Set up test fixtures."""
        self.account_repo = AsyncMock(spec=AccountRepository)
        self.password_service = Mock(spec=PasswordHashingService)
        self.command = RegisterLocalAccountCommand(
            account_repo=self.account_repo,
            password_service=self.password_service,
        )

    def _assert_untouched(self):
        self.account_repo.insert.assert_not_called()
        self.password_service.hash.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("identifier", [None, "", "   "])
    async def test_missing_identifier(self, identifier):
        with pytest.raises(MissingFieldError) as exc_info:
            await self.command.execute(identifier, TEST_SECRET)

        assert exc_info.value.field == "identifier"
        assert exc_info.value.code == "missing_field"
        self._assert_untouched()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("secret", [None, ""])
    async def test_missing_secret(self, secret):
        with pytest.raises(MissingFieldError) as exc_info:
            await self.command.execute(TEST_IDENTIFIER, secret)

        assert exc_info.value.field == "secret"
        self._assert_untouched()

    @pytest.mark.asyncio
    async def test_invalid_identifier(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            await self.command.execute("not-an-identifier", TEST_SECRET)

        assert exc_info.value.field == "identifier"
        assert exc_info.value.code == "invalid_format"
        self._assert_untouched()

    @pytest.mark.asyncio
    async def test_short_secret(self):
        self.password_service.validate_strength.side_effect = (
            PasswordHashingService(rounds=4).validate_strength
        )

        with pytest.raises(WeakSecretError) as exc_info:
            await self.command.execute(TEST_IDENTIFIER, "12345")

        assert isinstance(exc_info.value, InvalidFormatError)
        assert exc_info.value.field == "secret"
        assert exc_info.value.code == "invalid_format"
        self._assert_untouched()

    @pytest.mark.asyncio
    async def test_presence_checked_before_format(self):
        """A missing secret wins over a malformed identifier."""
        with pytest.raises(MissingFieldError):
            await self.command.execute("not-an-identifier", None)

    @pytest.mark.asyncio
    async def test_format_checked_before_secret_length(self):
        """A malformed identifier wins over a short secret."""
        self.password_service.validate_strength.side_effect = (
            PasswordHashingService(rounds=4).validate_strength
        )

        with pytest.raises(InvalidFormatError) as exc_info:
            await self.command.execute("not-an-identifier", "123")

        assert exc_info.value.field == "identifier"

    @pytest.mark.asyncio
    async def test_custom_validator_is_used(self):
        """The identifier check is pluggable."""
        validator = Mock()
        validator.is_valid.return_value = False
        command = RegisterLocalAccountCommand(
            self.account_repo,
            self.password_service,
            identifier_validator=validator,
        )

        with pytest.raises(InvalidFormatError):
            await command.execute(TEST_IDENTIFIER, TEST_SECRET)

        validator.is_valid.assert_called_once_with(TEST_IDENTIFIER)

"""
Pytest configuration for agronom_identity tests.

Provides a fast password service (bcrypt rounds=4), an in-memory account
store and an AccountDirectory wired to both.
"""

import pytest

from agronom_auth import PasswordHashingService
from agronom_identity import AccountDirectory, EmailOrPhoneValidator
from tests.shared.fixtures.in_memory import InMemoryAccountRepository


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Low-cost bcrypt so tests stay fast."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def account_repo() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def directory(account_repo, password_service) -> AccountDirectory:
    return AccountDirectory(
        account_repository=account_repo,
        password_service=password_service,
        identifier_validator=EmailOrPhoneValidator(),
    )

"""SQLAlchemy implementation of AccountRepository.

Each method opens its own session from the factory and commits (or rolls
back) before returning, so every call is one atomic store interaction and
concurrent callers never share a transaction.
"""

import logging
from typing import Optional, Union

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agronom_identity.domain.account import (
    Account,
    AccountAlreadyExistsError,
    AccountRepository,
    AccountStoreError,
    AuthProvider,
)
from agronom_identity.domain.shared.time import ensure_tz_aware
from agronom_identity.infrastructure.persistence.sqlalchemy.models import AccountModel

logger = logging.getLogger(__name__)


# asyncpg connect failures (refused, unreachable) surface as bare OSError
_STORE_FAULTS = (SQLAlchemyError, OSError)


def _is_unique_violation(error: IntegrityError) -> bool:
    text = str(error.orig).lower()
    return "unique" in text or "duplicate" in text


class AccountRepositorySQLAlchemy(AccountRepository):
    """SQLAlchemy implementation of the AccountRepository interface."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Parameters
        ----------
        session_factory
            Factory producing AsyncSession instances bound to the engine
        """
        self._session_factory = session_factory

    async def insert(self, account: Account) -> Account:
        model = self._map_to_model(account)

        try:
            async with self._session_factory.begin() as session:
                session.add(model)
                await session.flush()
                stored = self._map_to_domain(model)
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise AccountAlreadyExistsError(
                    account.provider.value,
                    account.provider_id,
                ) from e
            logger.exception("Integrity error inserting %s account", account.provider.value)
            raise AccountStoreError from e
        except _STORE_FAULTS as e:
            logger.exception("Failed to insert %s account", account.provider.value)
            raise AccountStoreError from e

        logger.debug("Inserted account: %s", stored.id)
        return stored

    async def find_by_provider(
        self,
        provider: Union[str, AuthProvider],
        provider_id: str,
    ) -> Optional[Account]:
        provider_value = AuthProvider(provider).value
        stmt = select(AccountModel).where(
            AccountModel.provider == provider_value,
            AccountModel.provider_id == provider_id,
        )
        return await self._fetch_one(stmt)

    async def find_by_id(self, account_id: int) -> Optional[Account]:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        return await self._fetch_one(stmt)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(AccountModel)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return result.scalar_one()
        except _STORE_FAULTS as e:
            logger.exception("Failed to count accounts")
            raise AccountStoreError from e

    async def _fetch_one(self, stmt) -> Optional[Account]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()
        except _STORE_FAULTS as e:
            logger.exception("Failed to read account")
            raise AccountStoreError from e

        if model is None:
            return None

        return self._map_to_domain(model)

    def _map_to_domain(self, model: AccountModel) -> Account:
        return Account.reconstitute(
            id=model.id,
            identifier=model.identifier,
            provider=model.provider,
            provider_id=model.provider_id,
            credential_hash=model.credential_hash,
            display_name=model.display_name,
            created_at=ensure_tz_aware(model.created_at) if model.created_at else None,
        )

    def _map_to_model(self, account: Account) -> AccountModel:
        model = AccountModel(
            identifier=account.identifier,
            credential_hash=account.credential_hash,
            display_name=account.display_name,
            provider=account.provider.value,
            provider_id=account.provider_id,
        )
        if account.created_at is not None:
            model.created_at = account.created_at
        return model

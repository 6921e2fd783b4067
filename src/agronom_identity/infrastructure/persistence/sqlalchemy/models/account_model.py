"""SQLAlchemy model for the Account aggregate."""

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from agronom_identity.domain.shared.time import utc_now
from agronom_identity.infrastructure.persistence.sqlalchemy.base import AccountBase


class AccountModel(AccountBase):
    """
    SQLAlchemy model for persisting Account aggregates.

    (provider, provider_id) is the only uniqueness constraint: the same
    email may exist once as a local account and once per federated
    provider.

    Table: accounts
    """

    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint(
            "provider",
            "provider_id",
            name="uq_accounts_provider_provider_id",
        ),
        CheckConstraint(
            "(provider = 'local' AND credential_hash IS NOT NULL) "
            "OR (provider <> 'local' AND credential_hash IS NULL)",
            name="ck_accounts_credential_hash_local_only",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Email or phone as supplied by the user (or the provider)
    identifier: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # bcrypt hash, ~60 chars; local accounts only
    credential_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    display_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    provider: Mapped[str] = mapped_column(String(32), nullable=False, default="local")
    provider_id: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, provider={self.provider})>"

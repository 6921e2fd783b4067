"""SQLAlchemy implementation of the account store.

Provides:
- AccountBase: Declarative base for account models
- AccountModel: SQLAlchemy model for the accounts table
- AccountRepositorySQLAlchemy: Repository implementation
- Engine/session/schema helpers

Examples
--------
engine = create_engine("sqlite+aiosqlite:///./users.db")
await create_tables(engine)
repository = AccountRepositorySQLAlchemy(create_session_factory(engine))
"""

from agronom_identity.infrastructure.persistence.sqlalchemy.base import AccountBase
from agronom_identity.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_factory,
    create_tables,
    drop_tables,
)
from agronom_identity.infrastructure.persistence.sqlalchemy.models import AccountModel
from agronom_identity.infrastructure.persistence.sqlalchemy.repositories import (
    AccountRepositorySQLAlchemy,
)

__all__ = [
    "AccountBase",
    "AccountModel",
    "AccountRepositorySQLAlchemy",
    "create_engine",
    "create_session_factory",
    "create_tables",
    "drop_tables",
]

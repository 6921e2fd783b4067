"""SQLAlchemy declarative base for agronom_identity models.

Examples
--------
# Creating the schema outside of `agronom-identity db init`:
from agronom_identity.infrastructure.persistence.sqlalchemy import AccountBase

async with engine.begin() as conn:
    await conn.run_sync(AccountBase.metadata.create_all)
"""

from sqlalchemy.orm import DeclarativeBase


class AccountBase(DeclarativeBase):
    """Declarative base for account directory models."""

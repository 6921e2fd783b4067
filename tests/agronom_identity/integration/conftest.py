"""
Pytest configuration for agronom_identity persistence tests.

SQLite tests run by default; PostgreSQL tests need TEST_POSTGRES_URL and are
marked ``integration``. Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    postgres_engine,
    postgres_session_factory,
    postgres_url,
    sqlite_engine,
    sqlite_session_factory,
)

__all__ = [
    "postgres_engine",
    "postgres_session_factory",
    "postgres_url",
    "sqlite_engine",
    "sqlite_session_factory",
]

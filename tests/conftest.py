"""Root pytest configuration.

Layout:
    tests/
    ├── unit/                  # agronom_auth and agronom_config
    ├── agronom_identity/
    │   ├── unit/              # in-memory store and mocks
    │   └── integration/       # SQLite file store; PostgreSQL via TEST_POSTGRES_URL
    └── shared/fixtures/       # stores and database engines

Tests marked ``integration`` need PostgreSQL and are skipped unless one of
these is given:
    --run-integration / RUN_INTEGRATION=1
    --run-all / RUN_ALL_TESTS=1

``config/.env.test``, when present, is loaded into the environment first.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from agronom_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

TEST_ENV_FILE = PROJECT_ROOT / "config" / ".env.test"
if TEST_ENV_FILE.exists():
    load_dotenv(TEST_ENV_FILE)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run every test, including integration tests",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: needs a PostgreSQL database (skipped by default)",
    )


def _integration_enabled(config) -> bool:
    return (
        config.getoption("--run-all")
        or config.getoption("--run-integration")
        or _env_flag("RUN_ALL_TESTS")
        or _env_flag("RUN_INTEGRATION")
    )


def pytest_collection_modifyitems(config, items):
    if _integration_enabled(config):
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if item.get_closest_marker("integration") is not None:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()

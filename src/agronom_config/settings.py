"""Runtime configuration for the account directory.

Values come from, highest priority first:
1. the process environment
2. the file named by ``AGRONOM_ENV_FILE`` (absolute or project-relative)
3. ``config/.env.dev`` for local work
4. ``config/.env`` for deployments
5. the defaults declared on ``Settings``
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE_VAR = "AGRONOM_ENV_FILE"
_DEFAULT_ENV_FILES = (".env.dev", ".env")


def _find_project_root() -> Path:
    """Nearest ancestor holding a ``config`` directory or a ``pyproject.toml``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return Path.cwd()


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get(_ENV_FILE_VAR)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in _DEFAULT_ENV_FILES:
        if (config_dir / name).exists():
            return config_dir / name
    return None


class Settings(BaseSettings):
    """Typed settings, read once per process through ``get_settings``."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = "Agronom Online"
    debug: bool = False

    # Database: explicit URL, or PostgreSQL components when POSTGRES_PASSWORD is set
    database_url_override: str = Field(
        default="sqlite+aiosqlite:///./users.db",
        validation_alias="DATABASE_URL",
    )
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "agronom"
    postgres_password: SecretStr | None = None

    # Credentials
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    password_min_length: int = Field(default=6, ge=1)
    identifier_validation: Literal["basic", "strict"] = "basic"

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> str:
        return str(v).upper() if v else "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """PostgreSQL once ``POSTGRES_PASSWORD`` is set, else ``DATABASE_URL``."""
        if self.postgres_password is None:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def database_type(self) -> str:
        """Dialect name, e.g. ``sqlite`` or ``postgresql``."""
        return self.database_url.split("+", 1)[0].split(":", 1)[0]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()

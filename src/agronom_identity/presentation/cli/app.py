"""Agronom identity CLI application using Typer.

Local administration of the account store: schema management plus the
three account operations, printed as JSON results.
"""

import asyncio
import logging
import sys
from functools import lru_cache
from typing import Awaitable, Callable, Optional

import typer
from rich.console import Console

from agronom_config import get_settings
from agronom_identity.application import (
    AccountDirectory,
    AccountResult,
    OperationResult,
    run_operation,
)
from agronom_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
    create_engine,
    create_session_factory,
    create_tables,
    drop_tables,
)

app = typer.Typer(
    name="agronom-identity",
    help="Agronom Online account directory CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)

account_app = typer.Typer(
    name="account",
    help="Register, authenticate and federate accounts",
    no_args_is_help=True,
)
app.add_typer(account_app)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for agronom modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    logging.getLogger("agronom_identity").setLevel(log_level)
    logging.getLogger("agronom_auth").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@app.callback()
def main() -> None:
    _configure_logging()


def _display_database(database_url: str) -> str:
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def _init_database() -> None:
    engine = create_engine()
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _reset_database() -> None:
    engine = create_engine()
    try:
        await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create the account tables if they don't exist."""
    console.print(f"Database: {_display_database(get_settings().database_url)}")
    asyncio.run(_init_database())
    console.print("[green]Database initialized[/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate the account tables."""
    console.print(f"Database: {_display_database(get_settings().database_url)}")
    if not force:
        console.print("[yellow]WARNING: This will DELETE ALL ACCOUNTS![/yellow]")
        typer.confirm("Continue?", abort=True)

    asyncio.run(_reset_database())
    console.print("[green]Database recreated[/green]")


async def _run_with_directory(
    call: Callable[[AccountDirectory], Awaitable[AccountResult]],
) -> OperationResult:
    engine = create_engine()
    try:
        repository = AccountRepositorySQLAlchemy(create_session_factory(engine))
        directory = AccountDirectory.from_settings(repository)
        return await run_operation(call(directory))
    finally:
        await engine.dispose()


def _print_result(result: OperationResult) -> None:
    console.print_json(data=result.to_dict())
    if not result.success:
        raise typer.Exit(code=1)


@account_app.command("register")
def register(
    identifier: str = typer.Argument(..., help="Email address or phone number"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Display name"),
) -> None:
    """Register a local account."""
    result = asyncio.run(
        _run_with_directory(lambda d: d.register(identifier, password, name)),
    )
    _print_result(result)


@account_app.command("login")
def login(
    identifier: str = typer.Argument(..., help="Email address or phone number"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
    ),
) -> None:
    """Authenticate a local account."""
    result = asyncio.run(
        _run_with_directory(lambda d: d.authenticate(identifier, password)),
    )
    _print_result(result)


@account_app.command("federated")
def federated(
    provider: str = typer.Argument(..., help="Provider tag, e.g. google or apple"),
    provider_id: str = typer.Argument(..., help="Subject id issued by the provider"),
    email: str = typer.Argument(..., help="Email asserted by the provider"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Display name"),
) -> None:
    """Sign in with a federated identity, creating the account if needed."""
    result = asyncio.run(
        _run_with_directory(
            lambda d: d.identify_or_create(provider, provider_id, email, name),
        ),
    )
    _print_result(result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()

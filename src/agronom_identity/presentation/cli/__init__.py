"""Command-line interface."""

from agronom_identity.presentation.cli.app import app, cli

__all__ = ["app", "cli"]

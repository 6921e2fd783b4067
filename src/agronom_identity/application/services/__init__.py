"""Application services for the account directory."""

from agronom_identity.application.services.account_directory import AccountDirectory

__all__ = ["AccountDirectory"]

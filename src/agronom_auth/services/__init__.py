"""Credential services."""

from agronom_auth.services.password_service import PasswordHashingService

__all__ = ["PasswordHashingService"]

"""Domain services for the account directory."""

from agronom_identity.services.identifier_validator import (
    EmailOrPhoneValidator,
    IdentifierValidator,
    StrictEmailOrPhoneValidator,
    canonical_identifier,
    get_identifier_validator,
)

__all__ = [
    "EmailOrPhoneValidator",
    "IdentifierValidator",
    "StrictEmailOrPhoneValidator",
    "canonical_identifier",
    "get_identifier_validator",
]

"""Validation strategies for account identifiers (email or phone number).

The account directory only depends on ``IdentifierValidator.is_valid``;
swap in ``StrictEmailOrPhoneValidator`` (or your own implementation) to
tighten the rules without touching the commands.
"""

import re
from abc import ABC, abstractmethod

from email_validator import EmailNotValidError, validate_email

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_SEPARATORS = re.compile(r"[\s\-().]")


def normalize_phone(value: str) -> str:
    """Strip separators and a leading '+' from a phone number."""
    stripped = _PHONE_SEPARATORS.sub("", value)
    if stripped.startswith("+"):
        stripped = stripped[1:]
    return stripped


def is_phone_number(value: str, min_digits: int = 9, max_digits: int = 15) -> bool:
    digits = normalize_phone(value)
    return digits.isdigit() and min_digits <= len(digits) <= max_digits


def canonical_identifier(identifier: str) -> str:
    """Stored form of an identifier: phone numbers reduced to their digits.

    Emails and anything that is not a phone number come back unchanged.

    >>> canonical_identifier("+7 (999) 123-45-67")
    '79991234567'
    >>> canonical_identifier("a@b.com")
    'a@b.com'
    """
    if "@" not in identifier and is_phone_number(identifier):
        return normalize_phone(identifier)
    return identifier


class IdentifierValidator(ABC):
    """Decides whether a string is an acceptable account identifier."""

    @abstractmethod
    def is_valid(self, identifier: str) -> bool:
        """Return True if the identifier may be used to register an account."""


class EmailOrPhoneValidator(IdentifierValidator):
    """Shape checks: ``local@domain.tld`` or 9-15 digits after separators.

    Examples
    --------
    >>> validator = EmailOrPhoneValidator()
    >>> validator.is_valid("a@b.com")
    True
    >>> validator.is_valid("+7 (999) 123-45-67")
    True
    >>> validator.is_valid("12345")
    False
    """

    def is_valid(self, identifier: str) -> bool:
        if not identifier:
            return False
        if "@" in identifier:
            return bool(_EMAIL_PATTERN.match(identifier))
        return is_phone_number(identifier)


class StrictEmailOrPhoneValidator(IdentifierValidator):
    """RFC-compliant email validation via email-validator, same phone rules.

    Deliverability (DNS) checks are off so validation stays offline.
    """

    def is_valid(self, identifier: str) -> bool:
        if not identifier:
            return False
        if "@" in identifier:
            try:
                validate_email(identifier, check_deliverability=False)
            except EmailNotValidError:
                return False
            return True
        return is_phone_number(identifier)


def get_identifier_validator(mode: str = "basic") -> IdentifierValidator:
    """Return the validator for a settings mode ('basic' or 'strict')."""
    if mode == "strict":
        return StrictEmailOrPhoneValidator()
    if mode == "basic":
        return EmailOrPhoneValidator()
    msg = f"Unknown identifier validation mode: {mode}"
    raise ValueError(msg)

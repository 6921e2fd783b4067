"""Unit tests for identifier validation strategies."""

import pytest

from agronom_identity.services import (
    EmailOrPhoneValidator,
    StrictEmailOrPhoneValidator,
    get_identifier_validator,
)
from agronom_identity.services.identifier_validator import (
    canonical_identifier,
    normalize_phone,
)

VALID_IDENTIFIERS = [
    "a@b.com",
    "first.last+tag@example.co.uk",
    "+7 (999) 123-45-67",
    "79991234567",
    "123456789",  # 9 digits
    "123456789012345",  # 15 digits
    "+1.202.555.0143",
]

INVALID_IDENTIFIERS = [
    "",
    "alice",
    "a@b",
    "a b@c.com",
    "@b.com",
    "12345678",  # 8 digits
    "1234567890123456",  # 16 digits
    "+7 999 abc 45 67",
    "++79991234567",
]


class TestEmailOrPhoneValidator:
    def setup_method(self):
        self.validator = EmailOrPhoneValidator()

    @pytest.mark.parametrize("identifier", VALID_IDENTIFIERS)
    def test_accepts(self, identifier):
        assert self.validator.is_valid(identifier) is True

    @pytest.mark.parametrize("identifier", INVALID_IDENTIFIERS)
    def test_rejects(self, identifier):
        assert self.validator.is_valid(identifier) is False


class TestStrictEmailOrPhoneValidator:
    def setup_method(self):
        self.validator = StrictEmailOrPhoneValidator()

    def test_accepts_regular_email(self):
        assert self.validator.is_valid("first.last@agronom.ru") is True

    def test_rejects_email_the_basic_check_lets_through(self):
        """Consecutive dots pass the shape check but not RFC validation."""
        assert EmailOrPhoneValidator().is_valid("a..b@agronom.ru") is True
        assert self.validator.is_valid("a..b@agronom.ru") is False

    def test_phone_rules_unchanged(self):
        assert self.validator.is_valid("+7 (999) 123-45-67") is True
        assert self.validator.is_valid("12345") is False


class TestHelpers:
    def test_normalize_phone(self):
        assert normalize_phone("+7 (999) 123-45-67") == "79991234567"

    @pytest.mark.parametrize(
        "identifier",
        ["+7 (999) 123-45-67", "79991234567", "+7 999 123 45 67", "7.999.123.45.67"],
    )
    def test_canonical_identifier_collapses_phone_spellings(self, identifier):
        assert canonical_identifier(identifier) == "79991234567"

    @pytest.mark.parametrize("identifier", ["a@b.com", "(a) b@c.com", "12345"])
    def test_canonical_identifier_leaves_non_phones(self, identifier):
        assert canonical_identifier(identifier) == identifier

    def test_get_identifier_validator(self):
        assert isinstance(get_identifier_validator("basic"), EmailOrPhoneValidator)
        assert isinstance(
            get_identifier_validator("strict"),
            StrictEmailOrPhoneValidator,
        )
        with pytest.raises(ValueError):
            get_identifier_validator("nope")

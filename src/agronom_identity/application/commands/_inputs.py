"""Input checks shared by the account commands."""

from typing import Any

from agronom_identity.exceptions import InvalidFormatError, MissingFieldError


def require_text(value: Any, field: str) -> str:
    """Return ``value`` stripped, or raise if it is absent or blank."""
    if value is None:
        raise MissingFieldError(field)
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        raise InvalidFormatError(field)

    stripped = value.strip()
    if not stripped:
        raise MissingFieldError(field)
    return stripped


def require_secret(value: Any, field: str = "secret") -> str:
    """Return the secret unchanged; whitespace is significant in passwords."""
    if value is None or value == "":
        raise MissingFieldError(field)
    if not isinstance(value, str):
        raise InvalidFormatError(field)
    return value


def optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None

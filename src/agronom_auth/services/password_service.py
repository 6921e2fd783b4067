"""bcrypt digests for account secrets.

The service owns the work factor and the length policy for secrets; it knows
nothing about accounts or storage.
"""

import secrets

import bcrypt

from agronom_auth.exceptions import CredentialHashingError, WeakPasswordError

_ENCODING = "utf-8"


class PasswordHashingService:
    """Salted one-way digests of secrets, plus the length policy they obey.

    Examples
    --------
    >>> hasher = PasswordHashingService(rounds=4)
    >>> digest = hasher.hash("secret1")
    >>> hasher.verify("secret1", digest)
    True
    >>> hasher.verify("secret2", digest)
    False
    """

    # Longest input bcrypt accepts, in encoded bytes
    MAX_BYTES = 72
    DEFAULT_MIN_LENGTH = 6

    def __init__(self, rounds: int = 12, min_length: int = DEFAULT_MIN_LENGTH):
        """Create a hasher.

        Parameters
        ----------
        rounds
            bcrypt cost: each increment doubles the work. Valid range 4..31.
        min_length
            Shortest secret, in characters, that ``hash`` will accept.
        """
        self._rounds = rounds
        self._min_length = min_length
        self._dummy_hash: str | None = None

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def min_length(self) -> int:
        return self._min_length

    def hash(self, password: str) -> str:
        """Digest ``password`` with a fresh salt.

        Raises
        ------
        WeakPasswordError
            The secret is empty, too short or too long.
        CredentialHashingError
            bcrypt refused the input or the cost.
        """
        self.validate_strength(password)
        return self._digest(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored digest in constant time.

        A digest bcrypt cannot parse simply does not match, and neither does a
        secret over ``MAX_BYTES``, whatever its prefix. Non-string arguments
        raise ``CredentialHashingError``.
        """
        if not isinstance(password, str) or not isinstance(password_hash, str):
            msg = "Password and hash must be strings"
            raise CredentialHashingError(msg)

        encoded = password.encode(_ENCODING)
        too_long = len(encoded) > self.MAX_BYTES
        try:
            # Over-long input still pays for one full check
            matched = bcrypt.checkpw(
                encoded[: self.MAX_BYTES],
                password_hash.encode(_ENCODING),
            )
        except ValueError:
            return False
        return matched and not too_long

    def validate_strength(self, password: str) -> None:
        """Raise ``WeakPasswordError`` unless ``password`` fits the policy.

        The policy is a minimum of ``min_length`` characters and a maximum of
        ``MAX_BYTES`` bytes once encoded.
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self._min_length:
            msg = f"Password must be at least {self._min_length} characters"
            raise WeakPasswordError(msg)

        if len(password.encode(_ENCODING)) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def dummy_hash(self) -> str:
        """Digest of a random value at the configured cost.

        Verifying a secret against it takes as long as a real check, so a
        lookup miss costs the same as a wrong secret. Computed once.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self._digest(secrets.token_hex(16))
        return self._dummy_hash

    def _digest(self, value: str) -> str:
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            digest = bcrypt.hashpw(value.encode(_ENCODING), salt)
        except (ValueError, TypeError) as e:
            msg = "Unable to hash password"
            raise CredentialHashingError(msg) from e
        return digest.decode(_ENCODING)

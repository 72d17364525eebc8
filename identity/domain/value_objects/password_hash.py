"""Password hash value object.

The hash is opaque material produced by an external hashing component
(Argon2, bcrypt, ...). This model only guarantees it is present; its
format is the hasher's business.
"""

from dataclasses import dataclass

from identity.domain.exceptions import ValueObjectValidationException


@dataclass(frozen=True)
class PasswordHash:
    """
    A non-empty, pre-computed password hash, stored verbatim.

    repr() and str() mask the value so hashes stay out of logs and
    tracebacks; collaborators that need the material read .value.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueObjectValidationException("Password hash cannot be empty")

    @classmethod
    def create(cls, raw: str) -> "PasswordHash":
        """
        Wrap a hash string without altering it.

        Raises:
            ValueObjectValidationException: If raw is None or blank
        """
        if raw is None or not raw.strip():
            raise ValueObjectValidationException("Password hash cannot be empty")

        return cls(raw)

    def __repr__(self) -> str:
        return "PasswordHash('********')"

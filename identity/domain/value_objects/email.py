"""Email value object."""

import logging
from dataclasses import dataclass

import email_validator
from email_validator import EmailNotValidError, validate_email

from identity.domain.exceptions import ValueObjectValidationException

logger = logging.getLogger(__name__)

# Intranet hosts are ordinary addresses for an identity store. This list is
# shared with every email_validator caller in the process (pydantic's EmailStr).
for _name in ("local", "localhost"):
    if _name in email_validator.SPECIAL_USE_DOMAIN_NAMES:
        email_validator.SPECIAL_USE_DOMAIN_NAMES.remove(_name)


def _normalize(raw: str) -> str:
    return raw.strip().lower()


@dataclass(frozen=True)
class Email:
    """
    A validated, normalized email address.

    Build instances with Email.create(), which trims and lower-cases the raw
    input first. Direct construction runs the same checks and only accepts a
    value that is already in normalized form, so an invalid Email can never
    exist.

    Validation is done by email-validator (the library behind pydantic's
    EmailStr) using address grammar only: no DNS lookups, and private
    domains such as "intranet", "localhost" or "*.local" are accepted.
    The address it reconstructs must match the normalized input exactly;
    this rejects input a lenient parser would silently repair.

    Usage:
        email = Email.create("  John.DOE@Domain.COM  ")
        str(email)  # "john.doe@domain.com"
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueObjectValidationException("Email cannot be empty")

        if _normalize(self.value) != self.value:
            raise ValueObjectValidationException(
                f"Email is not normalized: '{self.value}'. Use Email.create() for raw input.",
                value=self.value,
            )

        try:
            validated = validate_email(
                self.value,
                check_deliverability=False,
                globally_deliverable=False,
                test_environment=True,
            )
        except EmailNotValidError as exc:
            logger.debug("Rejected email %r: %s", self.value, exc)
            raise ValueObjectValidationException(
                f"Invalid email format: {self.value}", value=self.value
            ) from exc

        # Punycode input round-trips through ascii_email, Unicode through normalized.
        if self.value not in (validated.normalized, validated.ascii_email):
            logger.debug(
                "Rejected email %r: parser reconstructed %r",
                self.value,
                validated.normalized,
            )
            raise ValueObjectValidationException(
                f"Invalid email format: {self.value}", value=self.value
            )

    @classmethod
    def create(cls, raw: str) -> "Email":
        """
        Normalize and validate a raw email address.

        Args:
            raw: User-supplied address, any case, may have surrounding spaces

        Returns:
            Email holding the trimmed, lower-cased address

        Raises:
            ValueObjectValidationException: If raw is None, blank, or not a
                valid email address
        """
        if raw is None or not raw.strip():
            raise ValueObjectValidationException("Email cannot be empty", value=raw)

        return cls(_normalize(raw))

    def __str__(self) -> str:
        return self.value

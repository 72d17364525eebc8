"""Domain exceptions - invariant and validation failures."""

from identity.domain.exceptions.domain_exceptions import (
    DomainException,
    InvalidEntityStateException,
    MissingRequiredArgumentException,
    ValueObjectValidationException,
)
from identity.domain.exceptions.error_codes import describe_error_code

__all__ = [
    "DomainException",
    "MissingRequiredArgumentException",
    "ValueObjectValidationException",
    "InvalidEntityStateException",
    "describe_error_code",
]

"""Domain layer exceptions for invariant and validation failures."""

from typing import Optional


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions are raised when a domain invariant would be broken.
    Every domain object validates at construction time, so these always
    surface from a constructor or factory, never from a half-built object.

    Examples:
        - A required reference is missing
        - A value object rejects its raw input
        - An entity would be built in an invalid state
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class MissingRequiredArgumentException(DomainException):
    """Raised when a mandatory argument is None."""

    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(
            f"Missing required argument: '{param_name}'",
            error_code="MISSING_REQUIRED_ARGUMENT",
        )


class ValueObjectValidationException(DomainException):
    """Raised when a value object rejects its raw input."""

    def __init__(self, message: str, value: Optional[str] = None):
        self.value = value
        super().__init__(message, error_code="VALIDATION_FAILED")


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")

"""Unit tests for the domain exception hierarchy and error codes."""

import pytest

from identity.domain.exceptions import (
    DomainException,
    InvalidEntityStateException,
    MissingRequiredArgumentException,
    ValueObjectValidationException,
    describe_error_code,
)
from identity.domain.exceptions.error_codes import ERROR_CODE_DESCRIPTIONS

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "exc, error_code",
    [
        (DomainException("boom"), "DOMAIN_ERROR"),
        (MissingRequiredArgumentException("email"), "MISSING_REQUIRED_ARGUMENT"),
        (ValueObjectValidationException("bad"), "VALIDATION_FAILED"),
        (InvalidEntityStateException("bad state"), "INVALID_ENTITY_STATE"),
    ],
)
def test_exceptions_carry_error_code(exc, error_code):
    """Test that every exception exposes its machine-readable code."""
    # Assert
    assert isinstance(exc, DomainException)
    assert exc.error_code == error_code
    assert error_code in ERROR_CODE_DESCRIPTIONS


def test_missing_required_argument_names_parameter():
    """Test that the parameter name is kept and shown in the message."""
    # Act
    exc = MissingRequiredArgumentException("email")

    # Assert
    assert exc.param_name == "email"
    assert exc.message == "Missing required argument: 'email'"
    assert str(exc) == exc.message


def test_validation_exception_keeps_value():
    """Test that the offending value is available to callers."""
    # Act
    exc = ValueObjectValidationException("Invalid email format: x", value="x")

    # Assert
    assert exc.value == "x"
    assert exc.message == "Invalid email format: x"


def test_describe_known_error_code():
    """Test lookup of a known code."""
    # Act & Assert
    assert describe_error_code("VALIDATION_FAILED") == "A value did not pass validation"


def test_describe_unknown_error_code_defaults_to_domain_error():
    """Test that unknown codes fall back to the generic description."""
    # Act & Assert
    assert describe_error_code("NOT_A_CODE") == ERROR_CODE_DESCRIPTIONS["DOMAIN_ERROR"]

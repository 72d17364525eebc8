"""Error code catalogue for domain exceptions.

Collaborators that surface domain errors to end users (an API layer, a CLI)
look up the category for an exception's error_code here instead of matching
on exception classes.
"""


ERROR_CODE_DESCRIPTIONS = {
    "MISSING_REQUIRED_ARGUMENT": "A required value was not provided",
    "VALIDATION_FAILED": "A value did not pass validation",
    "INVALID_ENTITY_STATE": "The entity cannot be built in this state",
    "DOMAIN_ERROR": "The request violates a domain rule",
}


def describe_error_code(error_code: str) -> str:
    """
    Get the human-readable category for an error code.

    Args:
        error_code: The error code from the exception

    Returns:
        Description (defaults to the generic domain error description)
    """
    return ERROR_CODE_DESCRIPTIONS.get(
        error_code,
        ERROR_CODE_DESCRIPTIONS["DOMAIN_ERROR"],
    )

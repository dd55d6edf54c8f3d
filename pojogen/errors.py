"""
Exception hierarchy for pojogen.

Every error raised by the package derives from PojoGenError.
"""


class PojoGenError(Exception):
    """Base exception for all pojogen errors."""

    pass


class InvalidArgumentError(PojoGenError, ValueError):
    """Raised when a required argument is missing, empty or of the wrong type."""

    pass


def require_text(value, argument: str) -> str:
    """
    Validate that an identifier-like argument is a non-empty string.

    Args:
        value: Value passed by the caller
        argument: Argument name used in the error message

    Returns:
        The validated string

    Raises:
        InvalidArgumentError: If value is None, not a string or empty
    """
    if value is None:
        raise InvalidArgumentError(f"{argument} must not be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{argument} must be a string, got {type(value).__name__}"
        )
    if not value:
        raise InvalidArgumentError(f"{argument} must not be empty")
    return value


def require_not_none(value, argument: str):
    """Validate that an argument was supplied."""
    if value is None:
        raise InvalidArgumentError(f"{argument} must not be None")
    return value


def require_bool(value, argument: str) -> bool:
    """Validate that a flag argument is a real bool, not a truthy stand-in."""
    if not isinstance(value, bool):
        raise InvalidArgumentError(
            f"{argument} must be a bool, got {type(value).__name__}"
        )
    return value

"""Shared argument validators for domain operations.

Pydantic validates model fields on construction; these helpers cover the
plain method arguments that the models receive afterwards.
"""

from __future__ import annotations

from typing import TypeVar

from jukebox.domain.shared.exceptions import InvalidArgumentError
from jukebox.domain.shared.messages import ErrorMessages

T = TypeVar("T")


def require_present(value: T | None, field_name: str = "value") -> T:
    """Validate that an argument was supplied.

    Args:
        value: The argument to check.
        field_name: Name of the argument for error messages.

    Returns:
        The argument, unchanged.

    Raises:
        InvalidArgumentError: If the argument is None.
    """
    if value is None:
        raise InvalidArgumentError(
            ErrorMessages.FIELD_REQUIRED.format(field_name=field_name), field=field_name
        )
    return value


def validate_non_empty_string(value: str | None, field_name: str = "value") -> str:
    """Validate that a string is not empty or whitespace-only.

    Args:
        value: The string to validate.
        field_name: Name of the field for error messages.

    Returns:
        The string with surrounding whitespace removed.

    Raises:
        InvalidArgumentError: If the string is None, empty or whitespace-only.
    """
    if value is None or not value.strip():
        raise InvalidArgumentError(
            ErrorMessages.FIELD_CANNOT_BE_EMPTY.format(field_name=field_name), field=field_name
        )
    return value.strip()


def validate_positive_int(value: int, field_name: str = "value") -> int:
    """Validate that an integer is positive.

    Raises:
        InvalidArgumentError: If the integer is not positive.
    """
    if value <= 0:
        raise InvalidArgumentError(
            ErrorMessages.FIELD_MUST_BE_POSITIVE.format(field_name=field_name), field=field_name
        )
    return value

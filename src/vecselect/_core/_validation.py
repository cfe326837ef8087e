"""Argument checks shared by the positional and sampling operations."""

from __future__ import annotations

import logging

__all__ = ["InvalidArgument", "check_non_negative"]

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):  # noqa: N818
    """Raised when a numeric argument is outside of its documented domain.

    Subclasses `ValueError`, so existing `except ValueError` handlers keep working.
    """


def check_non_negative(value: int, what: str) -> int:
    """Return **value** unchanged, or raise `InvalidArgument` if it is negative.

    Args:
        value (int): The count, offset or length to check.
        what (str): Human readable name of the argument, used in the error message.

    Returns:
        int: The validated value.

    Raises:
        InvalidArgument: If **value** is lower than zero.

    Example:
    ```python
    >>> from vecselect._core import check_non_negative
    >>> check_non_negative(3, "N")
    3
    >>> check_non_negative(-1, "N")
    Traceback (most recent call last):
    ...
    vecselect._core._validation.InvalidArgument: Expected non-negative N, got -1.

    ```
    """
    if value < 0:
        msg = f"Expected non-negative {what}, got {value}."
        logger.debug("rejected argument: %s", msg)
        raise InvalidArgument(msg)
    return value

"""Type guard functions for classifying bind values at runtime.

The checks are order-sensitive in Python: ``bool`` is a subclass of ``int`` and
``datetime`` is a subclass of ``date``, so each guard excludes the narrower type.
"""

import datetime
from numbers import Number
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from sqlcall.protocols import CallConnectionProtocol

__all__ = (
    "is_boolean",
    "is_call_connection",
    "is_date_only",
    "is_numeric",
    "is_string_like",
    "is_timestamp",
)


def is_string_like(obj: Any) -> "TypeGuard[str]":
    """Check if a value is a string.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, str)


def is_numeric(obj: Any) -> "TypeGuard[Number]":
    """Check if a value is a number, excluding booleans.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Number) and not isinstance(obj, bool)


def is_boolean(obj: Any) -> "TypeGuard[bool]":
    """Check if a value is a boolean.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, bool)


def is_date_only(obj: Any) -> "TypeGuard[datetime.date]":
    """Check if a value is a calendar date without a time part.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, datetime.date) and not isinstance(obj, datetime.datetime)


def is_timestamp(obj: Any) -> "TypeGuard[datetime.datetime]":
    """Check if a value is a date with a time part.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, datetime.datetime)


def is_call_connection(obj: Any) -> "TypeGuard[CallConnectionProtocol]":
    """Check if an object can prepare call objects.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    from sqlcall.protocols import CallConnectionProtocol

    return isinstance(obj, CallConnectionProtocol)

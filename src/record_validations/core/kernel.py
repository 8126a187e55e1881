"""Permissive value predicates shared by the validation rules."""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any

# Text that reads as false under permissive boolean coercion
_FALSE_TEXT = frozenset({"0"})


def to_boolean(value: Any) -> bool:
    """Coerce ``value`` to a boolean the permissive way.

    Falsey: ``None``, ``False``, numeric zero and the text ``"0"``.
    Everything else is truthy, including ``"1"``, empty containers and
    arbitrary objects.

    Args:
        value: Any value.

    Returns:
        The boolean reading of ``value``.
    """
    if value is None or value is False:
        return False
    if isinstance(value, numbers.Number):
        return value != 0
    if isinstance(value, str) and value in _FALSE_TEXT:
        return False
    return True


def is_blank(value: Any) -> bool:
    """Check if a value is ``None`` or empty.

    An object is blank if it isn't ``None`` but doesn't hold a value:
    empty strings and empty collections are examples.
    """
    if value is None:
        return True
    return hasattr(value, "__len__") and len(value) == 0


def size_of(value: Any) -> Any:
    """Return the size used by the ``size`` rule.

    Sized objects report ``len(value)``. Real numbers and decimals (booleans
    excluded) are their own size.

    Raises:
        TypeError: If the value has no notion of size.
    """
    if is_count(value):
        return value
    return len(value)


def is_count(value: Any) -> bool:
    """Check if ``value`` can stand for a size: a real number or a decimal, not a bool."""
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def strictly_equal(left: Any, right: Any) -> bool:
    """Equality that also requires both values to have the same type.

    ``1 == 1.0`` and ``True == 1`` hold in Python, but are not strictly equal.
    """
    return type(left) is type(right) and left == right

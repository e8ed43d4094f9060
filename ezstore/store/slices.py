"""Helpers for rendering and comparing collections."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def pretty_string(items: Iterable[object]) -> str:
    """Render items as "[a, b, c]" using each item's string form."""
    if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
        raise TypeError(f"expected a collection, got {type(items).__name__}")
    return "[" + ", ".join(str(item) for item in items) + "]"


def unordered_equal(
    left: Sequence[T],
    right: Sequence[T],
    eq: Callable[[T, T], bool] = operator.eq,
) -> bool:
    """Return True if both have the same length and every left item has an equal right item."""
    if len(left) != len(right):
        return False
    return all(any(eq(item, other) for other in right) for item in left)
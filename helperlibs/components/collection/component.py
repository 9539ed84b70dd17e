"""
Collection component - emptiness checks.

Functional core - pure logic, no I/O.
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import Any

_MISSING = object()


def is_empty_or_null(collection: Iterable[Any] | None) -> bool:
    """
    Check whether collection is None or has no elements.

    Sized collections are answered with len(). Other iterables are
    advanced by at most one element, so a generator passed in loses
    its first item when it is not empty.
    """
    if collection is None:
        return True

    if isinstance(collection, Sized):
        return len(collection) == 0

    return next(iter(collection), _MISSING) is _MISSING

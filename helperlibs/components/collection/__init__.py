"""
Collection component.

Emptiness checks over optional iterables.
"""

from helperlibs.components.collection.component import is_empty_or_null

__all__ = [
    "is_empty_or_null",
]

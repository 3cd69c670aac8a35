from __future__ import annotations

"""Value objects and containers used across the AAC board core.

Nothing here performs I/O or touches a UI, so the objects can be reused from
tests, services and any front-end.
"""

from .associative_array import AssociativeArray, DEFAULT_CAPACITY
from .category import Category
from .outcomes import CategoryChanged, SelectionOutcome, Spoken, TextNotFound

__all__ = [
    "AssociativeArray",
    "DEFAULT_CAPACITY",
    "Category",
    "CategoryChanged",
    "SelectionOutcome",
    "Spoken",
    "TextNotFound",
]

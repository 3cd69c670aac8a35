"""Top-level package for the AAC board data layer.

Front-ends (image grid, text-to-speech) should only depend on the public API
exposed here rather than importing internal modules directly.
"""

from .core.board import BoardState  # re-export for convenience
from .core.models import AssociativeArray, Category

__all__: list[str] = [
    "AssociativeArray",
    "BoardState",
    "Category",
]

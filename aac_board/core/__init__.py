"""GUI-agnostic core of the AAC board: containers, pages and navigation state."""

from .board import BoardState, DEFAULT_CATEGORY
from .exceptions import KeyNotFoundError

__all__ = [
    "BoardState",
    "DEFAULT_CATEGORY",
    "KeyNotFoundError",
]

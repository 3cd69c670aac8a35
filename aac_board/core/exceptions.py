from __future__ import annotations

"""Exception classes for the AAC board core.

Lookup misses raise :class:`KeyNotFoundError`, which deliberately subclasses
``KeyError`` so callers can treat it like any other mapping miss. Board-level
failures (integrity, persistence, format) share the :class:`BoardError` base
so services can catch them in one place and turn them into result values.
"""

from typing import Any, Optional

__all__ = [
    "KeyNotFoundError",
    "BoardError",
    "BoardIntegrityError",
    "BoardPersistenceError",
    "BoardFormatError",
]


class KeyNotFoundError(KeyError):
    """Raised when a key has no live entry in an associative array."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key not found: {self.key!r}"


class BoardError(Exception):
    """Base exception for all board-level errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.cause = cause


class BoardIntegrityError(BoardError):
    """Raised when a category cannot produce text for one of its own images.

    This cannot happen while the store invariants hold; seeing it means the
    in-memory board is corrupt and must not be written out.
    """

    def __init__(self, category_key: str, image_id: str,
                 cause: Optional[Exception] = None) -> None:
        self.category_key = category_key
        self.image_id = image_id
        message = f"Category '{category_key}' lists image '{image_id}' but has no text for it"
        super().__init__(message, cause)


class BoardPersistenceError(BoardError):
    """Raised when the board file cannot be written or read."""

    def __init__(self, path: str, message: str,
                 cause: Optional[Exception] = None) -> None:
        self.path = path
        super().__init__(message, cause)

    def __str__(self) -> str:
        return f"[{self.path}] {super().__str__()}"


class BoardFormatError(BoardError):
    """Raised when persisted board text does not follow the line format."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"line {self.line_number}: {super().__str__()}"
        return super().__str__()

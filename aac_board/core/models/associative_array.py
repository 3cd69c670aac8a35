from __future__ import annotations

"""Order-preserving associative array with linear-scan lookup.

Entries live in a fixed-size slot list that doubles when full. Lookup walks
live slots from the front and compares keys with ``==``, so iteration order is
insertion order (minus removals) and re-setting a key keeps its position.
Board serialization relies on that ordering.
"""

import logging
from typing import Any, Generic, Iterator, List, Optional, TypeVar

from aac_board.core.exceptions import KeyNotFoundError

__all__ = ["AssociativeArray", "DEFAULT_CAPACITY"]

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CAPACITY = 16


class _Entry(Generic[K, V]):
    """A key/value pair; the value is replaced in place on re-set."""

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value


class AssociativeArray(Generic[K, V]):
    """Key/value store backed by a resizable array of pairs.

    Parameters
    ----------
    capacity : int, default=DEFAULT_CAPACITY
        Number of slots allocated up front. Values below 1 are coerced to 1
        so that doubling always makes room.

    Notes
    -----
    - Keys are unique among live entries; equality is ``==``, not identity.
    - Capacity only grows (exact doubling) and never shrinks.
    - Not thread-safe; callers synchronise externally if needed.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._pairs: List[Optional[_Entry[K, V]]] = [None] * max(1, int(capacity))
        self._size: int = 0

    # ------------------------------------------------------------------
    # Standard methods
    # ------------------------------------------------------------------
    def clone(self) -> "AssociativeArray[K, V]":
        """Return a shallow copy with its own slots and counters.

        Keys and values are shared by reference; the entry slots are new, so
        replacing a value in one store does not leak into the other.
        """
        copy: AssociativeArray[K, V] = AssociativeArray(self.capacity)
        for i in range(self._size):
            pair = self._pairs[i]
            copy._pairs[i] = _Entry(pair.key, pair.value)
        copy._size = self._size
        return copy

    def __str__(self) -> str:
        body = ", ".join(
            f"{self._pairs[i].key}: {self._pairs[i].value}" for i in range(self._size)
        )
        return "{ " + body + " }"

    def __repr__(self) -> str:
        return f"AssociativeArray(size={self._size}, capacity={self.capacity})"

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has_key(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.all_keys())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return len(self._pairs)

    def set(self, key: K, value: V) -> None:
        """Associate *value* with *key*, replacing any existing value in place."""
        try:
            index = self._find(key)
        except KeyNotFoundError:
            if self._size == len(self._pairs):
                self._expand()
            self._pairs[self._size] = _Entry(key, value)
            self._size += 1
            return
        self._pairs[index].value = value

    def get(self, key: K) -> V:
        """Return the value for *key*.

        Raises
        ------
        KeyNotFoundError
            If no live entry has this key.
        """
        return self._pairs[self._find(key)].value

    def has_key(self, key: K) -> bool:
        try:
            self._find(key)
        except KeyNotFoundError:
            return False
        return True

    def remove(self, key: K) -> None:
        """Remove *key* and close the gap; does nothing if the key is absent."""
        try:
            index = self._find(key)
        except KeyNotFoundError:
            return
        last = self._size - 1
        self._pairs[index:last] = self._pairs[index + 1:self._size]
        self._pairs[last] = None
        self._size = last

    def size(self) -> int:
        return self._size

    def all_keys(self) -> List[K]:
        """Return live keys in storage order."""
        return [self._pairs[i].key for i in range(self._size)]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _expand(self) -> None:
        old = len(self._pairs)
        self._pairs.extend([None] * old)
        logger.debug("AssociativeArray grown: capacity %d -> %d", old, len(self._pairs))

    def _find(self, key: K) -> int:
        for i in range(self._size):
            if self._pairs[i].key == key:
                return i
        raise KeyNotFoundError(key)

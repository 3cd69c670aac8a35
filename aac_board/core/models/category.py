from __future__ import annotations

"""A single page of the AAC board: image identifiers mapped to spoken text."""

from typing import List

from aac_board.core.models.associative_array import AssociativeArray

__all__ = ["Category"]


class Category:
    """Named page holding its own image -> text mapping.

    The display name is fixed at construction. Adding an image that is
    already present replaces its text (last write wins).
    """

    def __init__(self, name: str, capacity: int | None = None) -> None:
        self._name = name
        self._items: AssociativeArray[str, str] = (
            AssociativeArray(capacity) if capacity else AssociativeArray()
        )

    def __repr__(self) -> str:
        return f"Category(name={self._name!r}, images={self._items.size()})"

    def __len__(self) -> int:
        return self._items.size()

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def add_item(self, image_id: str, text: str) -> None:
        self._items.set(image_id, text)

    def remove_item(self, image_id: str) -> None:
        self._items.remove(image_id)

    def get_text(self, image_id: str) -> str:
        """Return the text for *image_id*; raises ``KeyNotFoundError`` if unknown."""
        return self._items.get(image_id)

    def has_image(self, image_id: str) -> bool:
        return self._items.has_key(image_id)

    def get_images(self) -> List[str]:
        return self._items.all_keys()

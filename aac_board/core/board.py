from __future__ import annotations

"""Navigation state of an AAC board.

:class:`BoardState` owns every :class:`Category` page and remembers which
page the user is looking at. The current page is held as a registry key, not
as a separate object, so it always resolves to a live, registered category.

Selection rules
---------------
An image on the current page acts as a category link when its identifier is
also a registered category key; selecting it moves the board to that page.
Any other image resolves to the text stored on the current page. Unknown
images produce :class:`TextNotFound` rather than an exception.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from aac_board.core.exceptions import KeyNotFoundError
from aac_board.core.models import (
    AssociativeArray,
    Category,
    CategoryChanged,
    SelectionOutcome,
    Spoken,
    TextNotFound,
)

__all__ = ["BoardState", "DEFAULT_CATEGORY"]

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "default"

PathLike = Union[str, Path]


class BoardState:
    """Registry of category pages plus the current-page pointer.

    Parameters
    ----------
    filename : str or Path, optional
        Board file to load on construction. Ignored when it does not exist,
        so a fresh board can be created at the path it will later be saved to.
    capacity : int, optional
        Starting slot count for every associative array the board creates.

    Examples
    --------
    >>> board = BoardState()
    >>> _ = board.link_category("img/food/plate.png", "food")
    >>> board.select("img/food/plate.png").message
    'Category changed to: food'
    """

    def __init__(self, filename: Optional[PathLike] = None,
                 capacity: Optional[int] = None) -> None:
        self._capacity = capacity
        self._categories: AssociativeArray[str, Category] = self._new_store()
        self._categories.set(DEFAULT_CATEGORY, self._new_category(DEFAULT_CATEGORY))
        self._current_key: str = DEFAULT_CATEGORY

        if filename is not None and Path(filename).exists():
            from aac_board.core.services.persistence_service import read_board_into

            read_board_into(self, filename)

    def __repr__(self) -> str:
        return (f"BoardState(categories={self._categories.size()}, "
                f"current={self._current_key!r})")

    # ------------------------------------------------------------------
    # Category registry
    # ------------------------------------------------------------------
    @property
    def current(self) -> Category:
        return self._categories.get(self._current_key)

    @property
    def current_key(self) -> str:
        return self._current_key

    def add_category(self, key: str, name: Optional[str] = None) -> Category:
        """Register a page under *key* and return it.

        *name* is the display name and defaults to *key*. Registering a key
        twice leaves the existing page untouched and returns it.

        The board file has no escaping, so a key that contains a space or a
        newline, starts with ``>``, or is blank is accepted here but does not
        reload as the same page.
        """
        if self._categories.has_key(key):
            logger.warning("Category already registered: key=%s", key)
            return self._categories.get(key)
        category = self._new_category(name if name is not None else key)
        self._categories.set(key, category)
        logger.debug("Category registered: key=%s name=%s", key, category.name)
        return category

    def link_category(self, image_id: str, name: str) -> Category:
        """Register a page under *image_id* and put its link on the current page.

        *image_id* becomes the page key, so the key restrictions of
        :meth:`add_category` apply to it.
        """
        category = self.add_category(image_id, name)
        self.add_item(image_id, name)
        return category

    def get_category(self, key: str) -> Category:
        return self._categories.get(key)

    def has_category(self, key: str) -> bool:
        return self._categories.has_key(key)

    def category_keys(self) -> List[str]:
        return self._categories.all_keys()

    # ------------------------------------------------------------------
    # Current page
    # ------------------------------------------------------------------
    def add_item(self, image_id: str, text: str) -> None:
        self.current.add_item(image_id, text)

    def current_images(self) -> List[str]:
        return self.current.get_images()

    def current_category_name(self) -> str:
        return self.current.name

    def is_category(self, image_id: str) -> bool:
        """Return True if *image_id* is selectable on the current page."""
        return self.current.has_image(image_id)

    def select(self, image_id: str) -> SelectionOutcome:
        """Resolve a selected image against the current page.

        Moves the board when the image links to a registered category,
        otherwise returns the mapped text or :class:`TextNotFound`.
        """
        if self.is_category(image_id) and self._categories.has_key(image_id):
            self._current_key = image_id
            name = self.current.name
            logger.info("Board navigated: key=%s name=%s", image_id, name)
            return CategoryChanged(name)

        try:
            text = self.current.get_text(image_id)
        except KeyNotFoundError:
            logger.info("Selection miss: image=%s category=%s",
                        image_id, self._current_key)
            return TextNotFound(image_id)
        return Spoken(text, image_id)

    def reset(self) -> None:
        self._current_key = DEFAULT_CATEGORY

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def serialize(self) -> str:
        """Return the board in its line-oriented text format."""
        from aac_board.core.services.persistence_service import serialize_board

        return serialize_board(self)

    def write_to_file(self, filename: PathLike, encoding: str = "utf-8") -> None:
        from aac_board.core.services.persistence_service import write_board

        write_board(self, filename, encoding=encoding)

    @classmethod
    def load(cls, filename: PathLike, encoding: str = "utf-8",
             capacity: Optional[int] = None) -> "BoardState":
        from aac_board.core.services.persistence_service import load_board

        return load_board(filename, encoding=encoding, capacity=capacity)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _new_store(self) -> AssociativeArray:
        return AssociativeArray(self._capacity) if self._capacity else AssociativeArray()

    def _new_category(self, name: str) -> Category:
        return Category(name, self._capacity)

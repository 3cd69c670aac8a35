from __future__ import annotations

"""Reading and writing boards in the line-oriented text format.

Format
------
One header line per category, followed by one line per image on that page::

    default default
    >img/food/plate.png food
    img/food/plate.png food
    >img/food/icons8-watermelon-96.png watermelon

A header is ``<key> <display name>``; an item is ``><image id> <text>``.
Categories appear in registration order and items in insertion order. There
is no escaping: keys and image ids must not contain spaces, while names and
texts may, because each line is split on its first space only.
Only the newline character ends a line; other Unicode line breaks inside a
text are kept as part of that text.

The full text is built before the file is opened, so a board that fails an
integrity check never leaves a half-written file behind.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from aac_board.core.board import BoardState
from aac_board.core.exceptions import (
    BoardFormatError,
    BoardIntegrityError,
    BoardPersistenceError,
    KeyNotFoundError,
)

__all__ = [
    "ITEM_PREFIX",
    "serialize_board",
    "write_board",
    "parse_board",
    "read_board_into",
    "load_board",
]

logger = logging.getLogger(__name__)

ITEM_PREFIX = ">"

PathLike = Union[str, Path]


def serialize_board(board: BoardState) -> str:
    """Return *board* as text, one newline-terminated line per header or item.

    Raises
    ------
    BoardIntegrityError
        If a category lists an image it cannot produce text for.
    """
    lines: List[str] = []
    for key in board.category_keys():
        category = board.get_category(key)
        lines.append(f"{key} {category.name}")
        for image_id in category.get_images():
            try:
                text = category.get_text(image_id)
            except KeyNotFoundError as exc:
                raise BoardIntegrityError(key, image_id, exc) from exc
            lines.append(f"{ITEM_PREFIX}{image_id} {text}")
    return "".join(line + "\n" for line in lines)


def write_board(board: BoardState, path: PathLike, encoding: str = "utf-8") -> None:
    """Serialize *board* and write it to *path*.

    Raises
    ------
    BoardIntegrityError
        Propagated from :func:`serialize_board`; nothing is written.
    BoardPersistenceError
        If the file cannot be opened or written.
    """
    payload = serialize_board(board)
    try:
        with open(path, "w", encoding=encoding, newline="\n") as fh:
            fh.write(payload)
    except OSError as exc:
        raise BoardPersistenceError(str(path), f"Could not write board file: {exc}", exc) from exc
    logger.info("Board written: path=%s categories=%d", path, len(board.category_keys()))


def parse_board(text: str, capacity: Optional[int] = None) -> BoardState:
    """Build a new :class:`BoardState` from persisted *text*."""
    board = BoardState(capacity=capacity)
    _apply_lines(board, text.split("\n"))
    return board


def read_board_into(board: BoardState, path: PathLike, encoding: str = "utf-8") -> None:
    """Load the categories stored at *path* into an existing *board*."""
    try:
        with open(path, "r", encoding=encoding, newline="") as fh:
            lines = fh.read().split("\n")
    except OSError as exc:
        raise BoardPersistenceError(str(path), f"Could not read board file: {exc}", exc) from exc
    _apply_lines(board, lines)
    logger.info("Board loaded: path=%s categories=%d", path, len(board.category_keys()))


def load_board(path: PathLike, encoding: str = "utf-8",
               capacity: Optional[int] = None) -> BoardState:
    board = BoardState(capacity=capacity)
    read_board_into(board, path, encoding=encoding)
    return board


def _apply_lines(board: BoardState, lines: Iterable[str]) -> None:
    category = None
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        if line.startswith(ITEM_PREFIX):
            if category is None:
                raise BoardFormatError("Item line appears before any category header", line_number)
            image_id, _, text = line[len(ITEM_PREFIX):].partition(" ")
            category.add_item(image_id, text)
            continue

        key, sep, name = line.partition(" ")
        if board.has_category(key):
            category = board.get_category(key)
            if sep and name != category.name:
                logger.debug("Header name ignored for registered key=%s name=%s", key, name)
        else:
            category = board.add_category(key, name if sep else key)

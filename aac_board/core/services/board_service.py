from __future__ import annotations

"""Service layer exposing the board to UI and speech front-ends.

The service wraps a :class:`BoardState` and turns every expected failure
(unknown image, unwritable file, corrupt board, malformed file) into a return
value. Front-ends never need to catch board exceptions.

Examples
--------
Basic usage::

    service = BoardService()
    service.add_mapping("img/a.png", "apple")
    outcome = service.resolve_selection("img/a.png")   # Spoken("apple")
    result = service.persist("board.txt")
    if not result.success:
        print(result.message)
"""

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from aac_board.config import ConfigManager
from aac_board.core.board import BoardState
from aac_board.core.exceptions import (
    BoardFormatError,
    BoardIntegrityError,
    BoardPersistenceError,
)
from aac_board.core.models import SelectionOutcome
from aac_board.core.services.persistence_service import load_board, write_board

__all__ = ["OperationResult", "BoardService"]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class OperationResult:
    """Result of a board operation that can fail.

    Attributes
    ----------
    success
        Whether the operation completed successfully.
    message
        Human-readable summary suitable for logs or UI display.
    details
        Optional structured details for diagnostics or caller logic.
    """
    success: bool
    message: str
    details: Optional[Dict[str, Any]] = None


class BoardService:
    """UI-agnostic facade over a single :class:`BoardState`.

    Parameters
    ----------
    board : BoardState, optional
        Board to operate on. A fresh board sized from configuration is
        created when omitted.
    config : dict, optional
        Board configuration section; defaults to
        ``ConfigManager().get_board_config()``.
    """

    def __init__(self, board: Optional[BoardState] = None,
                 config: Optional[Dict[str, Any]] = None) -> None:
        self._config = config if config is not None else ConfigManager().get_board_config()
        self._board = board if board is not None else BoardState(capacity=self._capacity())

    @property
    def board(self) -> BoardState:
        return self._board

    # -------------------------------------------------------------------------
    # Board editing and navigation
    # -------------------------------------------------------------------------

    def add_mapping(self, image_id: str, text: str) -> None:
        logger.debug("Board: add_mapping image=%s category=%s", image_id, self._board.current_key)
        self._board.add_item(image_id, text)

    def add_category(self, key: str, name: Optional[str] = None) -> None:
        self._board.add_category(key, name)

    def current_image_ids(self) -> List[str]:
        return self._board.current_images()

    def current_category_name(self) -> str:
        return self._board.current_category_name()

    def resolve_selection(self, image_id: str) -> SelectionOutcome:
        """Resolve a tapped image; never raises.

        :class:`Spoken` outcomes compare equal when their texts match, even
        for different images. Compare ``outcome.image_id`` as well when the
        source image matters.
        """
        outcome = self._board.select(image_id)
        logger.debug("Board: resolve_selection image=%s outcome=%s", image_id, type(outcome).__name__)
        return outcome

    def reset_to_default(self) -> None:
        self._board.reset()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def persist(self, destination: Optional[PathLike] = None) -> OperationResult:
        """Write the board to *destination* (or the configured board file)."""
        path = destination if destination is not None else self._config.get("board_file", "AACMappings.txt")
        logger.info("Board: persist path=%s", path)
        try:
            write_board(self._board, path, encoding=self._encoding())
        except BoardIntegrityError as exc:
            logger.error("Board FAIL: persist integrity path=%s error=%s", path, exc)
            return OperationResult(False, "Board is inconsistent; nothing was written.",
                                   {"error": "integrity", "path": str(path),
                                    "category": exc.category_key, "image_id": exc.image_id})
        except BoardPersistenceError as exc:
            logger.error("Board FAIL: persist io path=%s error=%s", path, exc)
            return OperationResult(False, f"Could not write board to '{path}'.",
                                   {"error": "io", "path": str(path), "reason": str(exc.cause)})
        logger.info("Board OK: persist path=%s", path)
        return OperationResult(True, f"Board saved to '{path}'.", {"path": str(path)})

    def open(self, source: PathLike) -> OperationResult:
        """Replace the current board with the one stored at *source*.

        On failure the current board is kept unchanged.
        """
        logger.info("Board: open path=%s", source)
        try:
            board = load_board(source, encoding=self._encoding(), capacity=self._capacity())
        except BoardFormatError as exc:
            logger.error("Board FAIL: open format path=%s error=%s", source, exc)
            return OperationResult(False, f"Board file '{source}' is malformed.",
                                   {"error": "format", "path": str(source), "line": exc.line_number})
        except BoardPersistenceError as exc:
            logger.error("Board FAIL: open io path=%s error=%s", source, exc)
            return OperationResult(False, f"Could not read board from '{source}'.",
                                   {"error": "io", "path": str(source), "reason": str(exc.cause)})
        self._board = board
        logger.info("Board OK: open path=%s categories=%d", source, len(board.category_keys()))
        return OperationResult(True, f"Board loaded from '{source}'.",
                               {"path": str(source), "categories": board.category_keys()})

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _capacity(self) -> Optional[int]:
        value = self._config.get("store_capacity")
        return int(value) if value else None

    def _encoding(self) -> str:
        return self._config.get("encoding") or "utf-8"

from __future__ import annotations

"""High-level services over the board state (persistence, UI facade)."""

from .board_service import BoardService, OperationResult  # noqa: F401
from .persistence_service import load_board, parse_board, serialize_board, write_board  # noqa: F401

__all__: list[str] = [
    "BoardService",
    "OperationResult",
    "load_board",
    "parse_board",
    "serialize_board",
    "write_board",
]

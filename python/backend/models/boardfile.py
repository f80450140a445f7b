"""Plain-text save format for boards.

::

    4 3
    2102
    1154
    5135

The header holds ``<width> <height>``; each following line is one row of
color digits, top row first.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backend.models.board import COLOR_COUNT, Board

logger = logging.getLogger(__name__)


def dumps(board: Board) -> str:
    lines = [f"{board.width} {board.height}"]
    lines.extend("".join(str(color) for color in row) for row in board.rows())
    return "\n".join(lines) + "\n"


def loads(text: str | bytes, colors: int = COLOR_COUNT) -> Board:
    return Board.parse(text, colors=colors)


def save(board: Board, filepath: Path) -> None:
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(dumps(board))
    logger.info("Saved %d×%d board to %s", board.width, board.height, filepath)


def load(filepath: Path, colors: int = COLOR_COUNT) -> Board:
    """Read a board from *filepath*.

    Raises ``OSError`` if the file cannot be read and a
    ``BoardParseError`` subclass if its contents are malformed.
    """
    with open(filepath, encoding="ascii", errors="replace") as f:
        board = Board.parse(f, colors=colors)
    logger.info("Loaded %d×%d board from %s", board.width, board.height, filepath)
    return board

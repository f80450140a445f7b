"""Core gameplay logic — applies erases, keeps score, detects game over."""

from __future__ import annotations

import logging
import random
from pathlib import Path

from backend.engine.gamestate import GameState
from backend.models import boardfile
from backend.models.board import COLOR_COUNT, Board, Position

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    BOARD_W = 20
    BOARD_H = 10

    def __init__(
        self,
        width: int = BOARD_W,
        height: int = BOARD_H,
        colors: int = COLOR_COUNT,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.colors = colors
        self._rng = rng
        self.state = GameState(Board.random(width, height, colors, rng=rng))

    @classmethod
    def from_board(
        cls, board: Board, rng: random.Random | None = None
    ) -> "GamePlay":
        """Create a game session from an existing board (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.width = board.width
        obj.height = board.height
        obj.colors = board.colors
        obj._rng = rng
        obj.state = GameState(board)
        return obj

    @classmethod
    def load(
        cls,
        filepath: Path,
        colors: int = COLOR_COUNT,
        rng: random.Random | None = None,
    ) -> "GamePlay":
        return cls.from_board(boardfile.load(filepath, colors=colors), rng=rng)

    # -- actions --------------------------------------------------------------

    def erase(self, x: int, y: int) -> int:
        """Erase the group at ``(x, y)``.

        Returns the number of removed tiles; 0 means nothing happened and
        neither the score nor the move counter changed.
        """
        removed = self.state.board.erase_component(x, y)
        if removed == 0:
            return 0

        points = self.state.record_erase(removed)
        logger.info(
            "Removed %d tiles (+%d), score %d", removed, points, self.state.score
        )
        if self.is_over:
            logger.info(
                "Game over: score %d, %d tiles left",
                self.state.score,
                self.state.board.remaining(),
            )
        return removed

    def reset(self) -> None:
        """Start over on a fresh random board of the same shape."""
        board = Board.random(self.width, self.height, self.colors, rng=self._rng)
        self.state = GameState(board)
        logger.info("New %d×%d board", self.width, self.height)

    def save(self, filepath: Path) -> None:
        boardfile.save(self.state.board, filepath)

    # -- queries --------------------------------------------------------------

    def highlight(self, x: int, y: int) -> set[Position]:
        """Tiles that would be erased by selecting ``(x, y)``."""
        return self.state.board.calc_component(x, y)

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def is_over(self) -> bool:
        return self.state.is_finished

    @property
    def is_cleared(self) -> bool:
        return self.state.is_cleared

"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.board import Board


class GameState:
    """Holds the current board, score, and move counter."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.score: int = 0
        self.moves: int = 0

    # -- scoring --------------------------------------------------------------

    @staticmethod
    def points_for(removed: int) -> int:
        """Points for erasing a group of *removed* tiles."""
        if removed < 2:
            return 0
        return (removed - 1) ** 2

    def record_erase(self, removed: int) -> int:
        points = self.points_for(removed)
        self.score += points
        self.moves += 1
        return points

    # -- queries --------------------------------------------------------------

    @property
    def is_finished(self) -> bool:
        return self.board.is_finished()

    @property
    def is_cleared(self) -> bool:
        return self.board.is_empty()

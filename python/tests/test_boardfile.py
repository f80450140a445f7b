"""Text save format tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from backend.models import boardfile
from backend.models.board import Board
from backend.models.errors import FormatError

SCENARIO = "4 3\n2102\n1154\n5135\n"


def test_dumps_matches_input_text() -> None:
    assert boardfile.dumps(Board.parse(SCENARIO)) == SCENARIO


def test_dumps_after_erase() -> None:
    board = Board.parse(SCENARIO)
    board.erase_component(1, 1)
    assert boardfile.dumps(board) == "4 3\n0020\n2540\n5350\n"


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_board_survives_encoding(seed: int) -> None:
    board = Board.random(9, 7, rng=random.Random(seed))
    assert boardfile.loads(boardfile.dumps(board)).cells == board.cells


def test_save_and_load(tmp_path: Path) -> None:
    board = Board.parse(SCENARIO)
    path = tmp_path / "nested" / "dir" / "board.txt"

    boardfile.save(board, path)

    assert path.read_text() == SCENARIO
    assert boardfile.load(path) == board


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        boardfile.load(tmp_path / "nope.txt")


def test_load_malformed_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("four three\n")
    with pytest.raises(FormatError):
        boardfile.load(path)

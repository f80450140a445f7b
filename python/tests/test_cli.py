"""Command-line launcher tests (non-interactive paths only)."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

import main

runner = CliRunner()

SCENARIO = "4 3\n2102\n1154\n5135\n"


def test_show_random_board() -> None:
    result = runner.invoke(main.app, ["--show", "--seed", "3", "-W", "5", "-H", "4"])
    assert result.exit_code == 0, result.output
    assert result.output.count("●") == 20


def test_show_loaded_board(tmp_path: Path) -> None:
    path = tmp_path / "board.txt"
    path.write_text(SCENARIO)

    result = runner.invoke(main.app, ["--show", "--load", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.count("●") == 11
    assert result.output.count("·") == 1


def test_load_malformed_board_fails(tmp_path: Path) -> None:
    path = tmp_path / "board.txt"
    path.write_text("4 3\n21x2\n")

    result = runner.invoke(main.app, ["--show", "--load", str(path)])

    assert result.exit_code == 1
    assert "Cannot load" in result.output


def test_rejects_too_many_colors() -> None:
    result = runner.invoke(main.app, ["--show", "--colors", "12"])
    assert result.exit_code != 0


def test_seed_applies_to_loaded_board(tmp_path: Path) -> None:
    path = tmp_path / "board.txt"
    path.write_text(SCENARIO)

    first = main._new_game(20, 10, 5, 7, path)
    second = main._new_game(20, 10, 5, 7, path)
    first.reset()
    second.reset()

    assert first.state.board == second.state.board
    assert (first.width, first.height) == (4, 3)

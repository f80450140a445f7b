#!/usr/bin/env python3
"""SameGame.

Usage::

    python main.py                      # Rich terminal, 20×10 board
    python main.py -f pygame            # Pygame GUI
    python main.py -W 12 -H 8 -c 4      # smaller board, four colours
    python main.py --load board.txt     # resume a saved board
    python main.py --show --seed 7      # print a board and exit
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gameplay import GamePlay  # noqa: E402
from backend.models import COLOR_COUNT, BoardParseError  # noqa: E402
from backend.models.board import MAX_COLORS  # noqa: E402

logger = logging.getLogger("samegame")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _new_game(
    width: int, height: int, colors: int, seed: Optional[int], load: Optional[Path]
) -> GamePlay:
    rng = random.Random(seed) if seed is not None else None
    if load is None:
        return GamePlay(width, height, colors, rng=rng)
    try:
        return GamePlay.load(load, colors=colors, rng=rng)
    except (OSError, BoardParseError) as exc:
        typer.echo(f"Cannot load {load}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    width: int = typer.Option(
        GamePlay.BOARD_W, "-W", "--width",
        min=1,
        help="Board width in tiles.",
    ),
    height: int = typer.Option(
        GamePlay.BOARD_H, "-H", "--height",
        min=1,
        help="Board height in tiles.",
    ),
    colors: int = typer.Option(
        COLOR_COUNT, "-c", "--colors",
        min=1, max=MAX_COLORS,
        help="Number of tile colours.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible boards.",
    ),
    load: Optional[Path] = typer.Option(
        None, "-l", "--load",
        help="Start from a saved board instead of a random one.",
    ),
    save_file: Path = typer.Option(
        DATA_DIR / "samegame.txt", "--save-file",
        help="Where the save key writes the current board.",
    ),
    show: bool = typer.Option(
        False, "--show",
        help="Print the board and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every erase to stderr.",
    ),
) -> None:
    """SameGame — clear the board by erasing groups of matching tiles."""
    _configure_logging(verbose)
    game = _new_game(width, height, colors, seed, load)
    logger.debug(
        "Starting %s frontend on a %d×%d board", frontend.value, game.width, game.height
    )

    if show:
        from frontend.cli.rich.app import show as show_board

        show_board(game.state.board)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(game, save_path=save_file)


if __name__ == "__main__":
    app()

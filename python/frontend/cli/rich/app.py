"""Rich terminal frontend — coloured tiles, cursor, and group highlight.

The cursor is moved with the arrow keys / WASD and the highlighted group
is erased with Space or Enter.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.board import Board, Position
from frontend.cli.input_handler import get_key

console = Console()

TILE_STYLES: dict[int, str] = {
    1: "bold red",
    2: "bold green",
    3: "bold blue",
    4: "bold yellow",
    5: "bold magenta",
    6: "bold cyan",
    7: "bold bright_red",
    8: "bold bright_green",
    9: "bold white",
}
TILE_GLYPH = "●"
EMPTY_GLYPH = "·"


# -- board rendering ----------------------------------------------------------


def _render_board(
    board: Board,
    cursor: Position | None = None,
    highlight: set[Position] | None = None,
) -> Table:
    """Return a Rich Table representing the grid, top row first."""
    highlight = highlight or set()
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(board.width):
        table.add_column(width=2, justify="center")

    for y in reversed(range(board.height)):
        cells: list[Text] = []
        for x in range(board.width):
            color = board.at(x, y)
            if color == 0:
                cell = Text(EMPTY_GLYPH, style="dim")
            else:
                cell = Text(TILE_GLYPH, style=TILE_STYLES.get(color, "bold"))
            if (x, y) in highlight:
                cell.stylize("on grey35")
            if (x, y) == cursor:
                cell.stylize("reverse")
            cells.append(cell)
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Score: ", style="dim")
    stats.append(str(game.score), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Tiles left: ", style="dim")
    stats.append(str(game.state.board.remaining()), style="bold yellow")
    return stats


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, cursor: Position, status: str = "") -> None:
    console.clear()

    board = game.state.board
    board_table = _render_board(board, cursor, game.highlight(*cursor))

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  erase   ", style="dim")
    controls.append("P", style="bold cyan")
    controls.append("  save   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]SameGame  {board.width}×{board.height}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_game_over(game: GamePlay) -> None:
    console.clear()

    board = game.state.board
    banner = Text()
    if game.is_cleared:
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("BOARD CLEARED!", style="bold green")
        banner.append(" ★\n", style="bold yellow")
    else:
        banner.append("\n  GAME OVER", style="bold red")
        banner.append("  no more groups to erase\n", style="red")

    group = Group(
        Align.center(_render_board(board)),
        Align.center(banner),
        Align.center(_stats(game)),
    )
    panel = Panel(
        group,
        title=f"[bold green]SameGame  {board.width}×{board.height}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to quit.\n", style="dim"))
    )


def show(board: Board) -> None:
    """Print *board* once, without entering the game loop."""
    console.print(_render_board(board))


# -- game loop ----------------------------------------------------------------


def _move_cursor(cursor: Position, key: str, board: Board) -> Position:
    x, y = cursor
    if key == "left":
        x = max(0, x - 1)
    elif key == "right":
        x = min(board.width - 1, x + 1)
    elif key == "up":
        y = min(board.height - 1, y + 1)
    elif key == "down":
        y = max(0, y - 1)
    return x, y


def _play_game(game: GamePlay, save_path: Path) -> None:
    cursor: Position = (0, 0)
    status = ""

    while True:
        while not game.is_over:
            _draw_game(game, cursor, status)
            status = ""
            key = get_key()

            if key in ("up", "down", "left", "right"):
                cursor = _move_cursor(cursor, key, game.state.board)
            elif key == "erase":
                removed = game.erase(*cursor)
                if removed:
                    status = f"[cyan]Removed {removed} tiles.[/cyan]"
            elif key == "save":
                try:
                    game.save(save_path)
                except OSError as exc:
                    status = f"[red]Could not save: {exc}[/red]"
                else:
                    status = f"[green]Saved to {save_path}[/green]"
            elif key == "restart":
                game.reset()
                cursor = (0, 0)
            elif key == "quit":
                return

        _draw_game_over(game)

        while True:
            key = get_key()
            if key == "restart":
                game.reset()
                cursor = (0, 0)
                break
            if key == "quit":
                return


# -- public entry point -------------------------------------------------------


def run(game: GamePlay, save_path: Path) -> None:
    """Launch the Rich terminal game on *game*."""
    try:
        _play_game(game, save_path)
    finally:
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))

"""Pygame GUI frontend.

Hovering a tile highlights the group it belongs to; a left click erases
it.  ``R`` deals a new board, ``P`` saves the current one, ``Q`` / ``Esc``
quits.
"""

from __future__ import annotations

from pathlib import Path

import pygame

from backend.engine.gameplay import GamePlay
from backend.models.board import Position

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_GREEN = (166, 227, 161)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)
COL_HIGHLIGHT = (192, 192, 192, 128)

TILE_COLORS: dict[int, tuple[int, int, int]] = {
    1: (243, 139, 168),  # red
    2: (166, 227, 161),  # green
    3: (137, 180, 250),  # blue
    4: (249, 226, 175),  # yellow
    5: (203, 166, 247),  # mauve
    6: (148, 226, 213),  # teal
    7: (250, 179, 135),  # peach
    8: (245, 194, 231),  # pink
    9: (205, 214, 244),  # text
}

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
TILE_PX = 32
HEADER_H = 40
FOOTER_H = 32


class PygameApp:
    def __init__(self, game: GamePlay, save_path: Path) -> None:
        self._game = game
        self._save_path = save_path
        self._cursor: Position | None = None
        self._status_msg = ""

        pygame.init()
        self._surf = pygame.display.set_mode(
            (
                game.width * TILE_PX,
                HEADER_H + game.height * TILE_PX + FOOTER_H,
            )
        )
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 20, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)
        self._update_caption()

    # ── geometry ────────────────────────────────────────────────────────────

    def _tile_rect(self, x: int, y: int) -> pygame.Rect:
        # Row 0 is the bottom of the board, drawn last on screen.
        row = self._game.height - 1 - y
        return pygame.Rect(x * TILE_PX, HEADER_H + row * TILE_PX, TILE_PX, TILE_PX)

    def _pixel_to_cell(self, px: int, py: int) -> Position | None:
        col = px // TILE_PX
        row = (py - HEADER_H) // TILE_PX
        if py < HEADER_H or not (0 <= col < self._game.width):
            return None
        if not 0 <= row < self._game.height:
            return None
        return col, self._game.height - 1 - row

    def _update_caption(self) -> None:
        pygame.display.set_caption(f"SameGame — score {self._game.score}")

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        board = game.state.board

        header = self._f_title.render(
            f"Score: {game.score}    Tiles: {board.remaining()}", True, COL_TEXT
        )
        self._surf.blit(header, (8, (HEADER_H - header.get_height()) // 2))

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(0, HEADER_H, game.width * TILE_PX, game.height * TILE_PX),
        )

        for x in range(board.width):
            for y in range(board.height):
                color = board.at(x, y)
                if color == 0:
                    continue
                rect = self._tile_rect(x, y).inflate(-2, -2)
                pygame.draw.rect(
                    self._surf,
                    TILE_COLORS.get(color, COL_TEXT),
                    rect,
                    border_radius=6,
                )

        if self._cursor is not None and not game.is_over:
            overlay = pygame.Surface((TILE_PX, TILE_PX), pygame.SRCALPHA)
            overlay.fill(COL_HIGHLIGHT)
            for x, y in game.highlight(*self._cursor):
                self._surf.blit(overlay, self._tile_rect(x, y).topleft)

        footer_y = HEADER_H + game.height * TILE_PX + 8
        if game.is_over:
            text, col = (
                ("Board cleared!  R  new board     Q  quit", COL_GREEN)
                if game.is_cleared
                else ("Game over.  R  new board     Q  quit", COL_RED)
            )
        elif self._status_msg:
            text, col = self._status_msg, COL_YELLOW
        else:
            text, col = "Click  erase     R  new board     P  save     Q  quit", COL_OVERLAY0
        self._surf.blit(self._f_small.render(text, True, col), (8, footer_y))

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        game = self._game
        if ev.type == pygame.MOUSEMOTION:
            self._cursor = self._pixel_to_cell(*ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            cell = self._pixel_to_cell(*ev.pos)
            if cell is not None and game.erase(*cell):
                self._status_msg = ""
                self._update_caption()
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
            if ev.key == pygame.K_r:
                game.reset()
                self._status_msg = ""
                self._update_caption()
            elif ev.key == pygame.K_p:
                try:
                    game.save(self._save_path)
                except OSError as exc:
                    self._status_msg = f"Could not save: {exc}"
                else:
                    self._status_msg = f"Saved to {self._save_path}"
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(game: GamePlay, save_path: Path) -> None:
    """Open the game window on *game*."""
    app = PygameApp(game, save_path)
    app.run_loop()

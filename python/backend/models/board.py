"""Board model for SameGame.

Cells are stored in a flat list, column by column, bottom to top within a
column.  ``y`` grows upward, so gravity moves tiles toward ``y == 0`` and
column compaction moves columns toward ``x == 0``::

    ^^^^^^E
    ||||||^
    |||||||
    S||||||

    S: index 0, E: index width * height - 1
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from dataclasses import dataclass
from typing import IO, Union

from backend.models.errors import FormatError, IncompleteInputError, InvalidCellError

logger = logging.getLogger(__name__)

COLOR_COUNT = 5
MAX_COLORS = 9  # one decimal digit per cell in the text format

Position = tuple[int, int]
Source = Union[str, bytes, IO[str], IO[bytes]]


@dataclass
class Board:
    """A fixed-size SameGame grid.

    ``cells`` holds ``width * height`` color codes; ``0`` is an empty cell
    and ``1..colors`` are tile colors.
    """

    width: int
    height: int
    cells: list[int]
    colors: int = COLOR_COUNT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {self.width}×{self.height}."
            )
        if not 1 <= self.colors <= MAX_COLORS:
            raise ValueError(f"colors must be in 1..{MAX_COLORS}, got {self.colors}.")
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} cells for a "
                f"{self.width}×{self.height} board, got {len(self.cells)}."
            )
        bad = [color for color in self.cells if not 0 <= color <= self.colors]
        if bad:
            raise ValueError(
                f"Cell values must be in 0..{self.colors}, got {bad[0]}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        colors: int = COLOR_COUNT,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a board with every cell drawn uniformly from ``1..colors``.

        Pass *rng* to make the layout reproducible; otherwise each call gets
        its own generator.
        """
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {width}×{height}."
            )
        rng = rng or random.Random()
        cells = [rng.randint(1, colors) for _ in range(width * height)]
        return cls(width=width, height=height, cells=cells, colors=colors)

    @classmethod
    def parse(cls, source: Source, colors: int = COLOR_COUNT) -> Board:
        """Build a board from its text encoding.

        Example::

            Board.parse("4 3\\n0123\\n1234\\n2345\\n")

        The first line holds ``<width> <height>``; the next ``height`` lines
        hold one digit per cell, top row first.  Characters past ``width``
        and lines past ``height`` are ignored.
        """
        if not 1 <= colors <= MAX_COLORS:
            raise ValueError(f"colors must be in 1..{MAX_COLORS}, got {colors}.")
        lines = _split_lines(_read_text(source))

        if not lines:
            raise FormatError("Format error: missing '<width> <height>' header.")
        tokens = lines[0].split()
        if len(tokens) != 2:
            raise FormatError(
                f"Format error: expected '<width> <height>', got {lines[0]!r}."
            )
        if not all(_is_decimal(token) for token in tokens):
            raise FormatError(
                f"Format error: expected '<width> <height>', got {lines[0]!r}."
            )
        width, height = int(tokens[0]), int(tokens[1])
        if width <= 0:
            raise FormatError(f"Width must be positive, got {width}.")
        if height <= 0:
            raise FormatError(f"Height must be positive, got {height}.")

        rows = lines[1 : height + 1]
        if len(rows) < height:
            raise IncompleteInputError(expected=height, got=len(rows))

        top = str(colors)
        cells = [0] * (width * height)
        for r, line in enumerate(rows):
            y = height - 1 - r
            for x, ch in enumerate(line[:width]):
                if not "0" <= ch <= top:
                    raise InvalidCellError(r, x, ch, colors)
                cells[height * x + y] = int(ch)

        return cls(width=width, height=height, cells=cells, colors=colors)

    # -- queries --------------------------------------------------------------

    def xy2idx(self, x: int, y: int) -> int:
        return self.height * x + y

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"({x}, {y}) is outside the {self.width}×{self.height} board."
            )
        return self.cells[self.xy2idx(x, y)]

    def neighbors(self, x: int, y: int) -> Iterator[Position]:
        """Yield the orthogonal neighbors of ``(x, y)`` that lie on the board."""
        if x > 0:
            yield x - 1, y
        if x < self.width - 1:
            yield x + 1, y
        if y > 0:
            yield x, y - 1
        if y < self.height - 1:
            yield x, y + 1

    def rows(self) -> Iterator[list[int]]:
        """Yield the board's rows from the top (``y == height - 1``) down."""
        for y in reversed(range(self.height)):
            yield [self.cells[self.xy2idx(x, y)] for x in range(self.width)]

    def calc_component(self, x: int, y: int) -> set[Position]:
        """Return the erasable group containing ``(x, y)``.

        Empty cells and tiles without a same-colored neighbor have no
        component; both give an empty set.
        """
        if self.at(x, y) == 0:
            return set()
        component = self._flood(x, y)
        if len(component) == 1:
            return set()
        return component

    def is_finished(self) -> bool:
        """Check that no two adjacent tiles share a color."""
        for x in range(self.width):
            for y in range(self.height):
                color = self.cells[self.xy2idx(x, y)]
                if color == 0:
                    continue
                if x > 0 and color == self.cells[self.xy2idx(x - 1, y)]:
                    return False
                if y > 0 and color == self.cells[self.xy2idx(x, y - 1)]:
                    return False
        return True

    def is_empty(self) -> bool:
        return not any(self.cells)

    def remaining(self) -> int:
        """Number of tiles still on the board."""
        return sum(1 for color in self.cells if color)

    # -- mutation -------------------------------------------------------------

    def erase_component(self, x: int, y: int) -> int:
        """Remove the group at ``(x, y)`` and let the board settle.

        Returns the number of removed tiles, or 0 if ``(x, y)`` is empty or
        isolated, in which case the board is left untouched.
        """
        if self.at(x, y) == 0:
            return 0

        component = self._flood(x, y)
        if len(component) == 1:
            return 0

        for cx, cy in component:
            self.cells[self.xy2idx(cx, cy)] = 0

        self.pack_cellwise()
        self.pack_colwise()

        logger.debug("Erased %d tiles at (%d, %d)", len(component), x, y)
        return len(component)

    def pack_cellwise(self) -> None:
        """Drop tiles to the bottom of each column, keeping their order."""
        h = self.height
        for x in range(self.width):
            start = h * x
            column = self.cells[start : start + h]
            tiles = [color for color in column if color]
            self.cells[start : start + h] = tiles + [0] * (h - len(tiles))

    def pack_colwise(self) -> None:
        """Shift non-empty columns left over the empty ones."""
        h = self.height
        target = 0
        for x in range(self.width):
            column = self.cells[h * x : h * x + h]
            if not any(column):
                continue
            if target != x:
                self.cells[h * target : h * target + h] = column
                self.cells[h * x : h * x + h] = [0] * h
            target += 1

    def copy(self) -> Board:
        return Board(
            width=self.width,
            height=self.height,
            cells=self.cells[:],
            colors=self.colors,
        )

    # -- helpers --------------------------------------------------------------

    def _flood(self, x: int, y: int) -> set[Position]:
        # Explicit stack, no recursion.
        color = self.cells[self.xy2idx(x, y)]
        seen: set[Position] = {(x, y)}
        stack: list[Position] = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            for nx, ny in self.neighbors(cx, cy):
                if (nx, ny) in seen:
                    continue
                if self.cells[self.xy2idx(nx, ny)] != color:
                    continue
                seen.add((nx, ny))
                stack.append((nx, ny))
        return seen


def _read_text(source: Source) -> str:
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, bytes):
        return source.decode("ascii", errors="replace")
    return source


def _split_lines(text: str) -> list[str]:
    # Only "\n" and "\r\n" end a line; a final newline does not open a new row.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _is_decimal(token: str) -> bool:
    # Plain ASCII digits with an optional sign; no "1_0" or non-ASCII digits.
    digits = token[1:] if token[:1] in ("+", "-") else token
    return digits.isascii() and digits.isdigit()

"""Errors raised while reading a board from its text encoding."""

from __future__ import annotations


class BoardParseError(ValueError):
    """Base class for every recoverable board-loading failure."""


class FormatError(BoardParseError):
    """The ``<width> <height>`` header is malformed or out of range."""


class InvalidCellError(BoardParseError):
    """A row contains a character that is not a valid color digit."""

    def __init__(self, row: int, column: int, char: str, colors: int) -> None:
        self.row = row
        self.column = column
        self.char = char
        super().__init__(
            f"Invalid cell {char!r} at row {row}, column {column} "
            f"(expected a digit 0-{colors})."
        )


class IncompleteInputError(BoardParseError):
    """The input ended before the declared number of rows was read."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Incomplete input: expected {expected} rows, got {got}.")

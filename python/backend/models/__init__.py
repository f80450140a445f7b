from backend.models.board import COLOR_COUNT, Board
from backend.models.errors import (
    BoardParseError,
    FormatError,
    IncompleteInputError,
    InvalidCellError,
)

__all__ = [
    "COLOR_COUNT",
    "Board",
    "BoardParseError",
    "FormatError",
    "IncompleteInputError",
    "InvalidCellError",
]

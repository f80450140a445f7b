"""Key decoding tests for the terminal frontend."""

from __future__ import annotations

import pytest

from frontend.cli import input_handler


def _feed(monkeypatch: pytest.MonkeyPatch, chars: str) -> None:
    it = iter(chars)
    monkeypatch.setattr(input_handler, "_getch", lambda: next(it))


@pytest.mark.parametrize(
    "chars, action",
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("d", "right"),
        ("\x1b[A", "up"),
        ("\x1b[D", "left"),
        ("\x00H", "up"),
        ("\xe0M", "right"),
        (" ", "erase"),
        ("\r", "erase"),
        ("r", "restart"),
        ("p", "save"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("\x1bx", "quit"),
        ("7", "7"),
        ("\x07", ""),
    ],
)
def test_get_key(monkeypatch: pytest.MonkeyPatch, chars: str, action: str) -> None:
    _feed(monkeypatch, chars)
    assert input_handler.get_key() == action

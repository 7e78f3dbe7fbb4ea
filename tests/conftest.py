"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessref.core.board import Board
from chessref.core.piece import Piece
from chessref.core.types import parse_square


def place(**pieces: str) -> Board:
    """Board holding only the given pieces, e.g. ``place(e1="K", e8="k")``."""
    board = Board()
    for name, char in pieces.items():
        board[parse_square(name)] = Piece.from_char(char)
    return board


@pytest.fixture
def board_with() -> Callable[..., Board]:
    """Factory for sparse boards keyed by square name."""
    return place

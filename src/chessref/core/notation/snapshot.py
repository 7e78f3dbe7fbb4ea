"""Board snapshot parsing and serialization.

A snapshot is 64 characters laid out row-major from a8 to h1: a piece
symbol per occupied square and a space per empty one.
"""

from __future__ import annotations

from chessref.core.board import Board
from chessref.core.errors import MalformedSnapshot
from chessref.core.piece import PIECE_CHARS, Piece

SNAPSHOT_LENGTH = 64
EMPTY = " "

STARTING_SNAPSHOT = (
    "rnbqkbnr"
    "pppppppp"
    "        "
    "        "
    "        "
    "        "
    "PPPPPPPP"
    "RNBQKBNR"
)


def board_from_snapshot(text: str) -> Board:
    """Parse a 64-character snapshot into a :class:`Board`."""
    if len(text) != SNAPSHOT_LENGTH:
        raise MalformedSnapshot(
            f"Snapshot must hold {SNAPSHOT_LENGTH} squares, got {len(text)}"
        )
    board = Board()
    for sq, ch in enumerate(text):
        if ch == EMPTY:
            continue
        if ch not in PIECE_CHARS:
            raise MalformedSnapshot(f"Invalid snapshot character {ch!r} at {sq}")
        board[sq] = Piece.from_char(ch)
    return board


def board_to_snapshot(board: Board) -> str:
    """Serialize *board* into its 64-character snapshot."""
    return "".join(EMPTY if piece is None else str(piece) for piece in board)


def render_board(board: Board) -> str:
    """Eight lines of eight characters, rank 8 first."""
    snapshot = board_to_snapshot(board)
    return "\n".join(snapshot[row : row + 8] for row in range(0, SNAPSHOT_LENGTH, 8))

"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessref.core import Board, Rules, board_from_snapshot, STARTING_SNAPSHOT

    board = board_from_snapshot(STARTING_SNAPSHOT)
    print(Rules.check_status(board).answer)
"""

from chessref.core.board import Board
from chessref.core.enums import Color, PieceType
from chessref.core.errors import (
    CaptureMismatch,
    ChessrefError,
    IllegalMove,
    InvalidPromotion,
    MalformedCommand,
    MalformedSnapshot,
    NoSuchPiece,
)
from chessref.core.move import MoveRequest
from chessref.core.movement import is_pseudo_legal
from chessref.core.notation import (
    STARTING_SNAPSHOT,
    board_from_snapshot,
    board_to_snapshot,
    parse_command,
    render_board,
)
from chessref.core.piece import Piece
from chessref.core.rules import CheckStatus, Rules
from chessref.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Errors
    "CaptureMismatch",
    "ChessrefError",
    "IllegalMove",
    "InvalidPromotion",
    "MalformedCommand",
    "MalformedSnapshot",
    "NoSuchPiece",
    # Domain objects
    "Board",
    "CheckStatus",
    "MoveRequest",
    "Piece",
    "Rules",
    "is_pseudo_legal",
    # Notation
    "STARTING_SNAPSHOT",
    "board_from_snapshot",
    "board_to_snapshot",
    "parse_command",
    "render_board",
]

"""Pseudo-legal movement rules, one pure predicate per piece kind.

A predicate answers whether *piece* standing on *from_sq* may move to
*to_sq* on *board*.  Nothing here mutates the board, and nothing looks at
whether the mover's own king ends up attacked.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, TypeAlias

from chessref.core.enums import Color, PieceType
from chessref.core.types import Square, file_of, is_valid_square, make_square, rank_of

if TYPE_CHECKING:
    from chessref.core.board import Board
    from chessref.core.piece import Piece


MovePredicate: TypeAlias = Callable[["Piece", Square, Square, "Board"], bool]

KNIGHT_JUMPS: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})

# Rank index of each color's pawns before they have moved.
PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
# Rank index a pawn of each color promotes on.
PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


def pawn_direction(color: Color) -> int:
    """Rank delta of a forward pawn step: white towards rank 0."""
    return -1 if color == Color.WHITE else 1


def _deltas(from_sq: Square, to_sq: Square) -> tuple[int, int]:
    return rank_of(to_sq) - rank_of(from_sq), file_of(to_sq) - file_of(from_sq)


def _can_land(piece: Piece, to_sq: Square, board: Board) -> bool:
    """Destination is empty or holds an opposing piece."""
    target = board[to_sq]
    return target is None or piece.is_opponent(target)


def squares_between(from_sq: Square, to_sq: Square) -> Iterator[Square]:
    """Squares strictly between two squares on a shared line or diagonal."""
    d_rank, d_file = _deltas(from_sq, to_sq)
    step_rank = (d_rank > 0) - (d_rank < 0)
    step_file = (d_file > 0) - (d_file < 0)
    rank = rank_of(from_sq) + step_rank
    file = file_of(from_sq) + step_file
    target = (rank_of(to_sq), file_of(to_sq))
    while (rank, file) != target:
        yield make_square(file, rank)
        rank += step_rank
        file += step_file


def is_path_clear(from_sq: Square, to_sq: Square, board: Board) -> bool:
    return all(board.is_empty(sq) for sq in squares_between(from_sq, to_sq))


# -- Predicates ---------------------------------------------------------------


def king_move(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    d_rank, d_file = _deltas(from_sq, to_sq)
    if max(abs(d_rank), abs(d_file)) != 1:
        return False
    return _can_land(piece, to_sq, board)


def rook_move(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    d_rank, d_file = _deltas(from_sq, to_sq)
    if (d_rank == 0) == (d_file == 0):
        return False
    return is_path_clear(from_sq, to_sq, board) and _can_land(piece, to_sq, board)


def bishop_move(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    d_rank, d_file = _deltas(from_sq, to_sq)
    if d_rank == 0 or abs(d_rank) != abs(d_file):
        return False
    return is_path_clear(from_sq, to_sq, board) and _can_land(piece, to_sq, board)


def queen_move(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    return rook_move(piece, from_sq, to_sq, board) or bishop_move(
        piece, from_sq, to_sq, board
    )


def knight_move(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    # Jumps; occupancy of the destination is settled by the capture checks.
    d_rank, d_file = _deltas(from_sq, to_sq)
    return (abs(d_rank), abs(d_file)) in KNIGHT_JUMPS


def pawn_move(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    d_rank, d_file = _deltas(from_sq, to_sq)
    forward = pawn_direction(piece.color)

    # Diagonal step: captures only, never en passant.
    if abs(d_file) == 1 and d_rank == forward:
        return piece.is_opponent(board[to_sq])

    if d_file != 0:
        return False

    if d_rank == forward:
        return board.is_empty(to_sq)

    if d_rank == 2 * forward and rank_of(from_sq) == PAWN_START_RANK[piece.color]:
        middle = make_square(file_of(from_sq), rank_of(from_sq) + forward)
        return board.is_empty(middle) and board.is_empty(to_sq)

    return False


MOVE_RULES: dict[PieceType, MovePredicate] = {
    PieceType.KING: king_move,
    PieceType.QUEEN: queen_move,
    PieceType.ROOK: rook_move,
    PieceType.BISHOP: bishop_move,
    PieceType.KNIGHT: knight_move,
    PieceType.PAWN: pawn_move,
}


def is_pseudo_legal(piece: Piece, from_sq: Square, to_sq: Square, board: Board) -> bool:
    """Whether *piece* on *from_sq* may move to *to_sq* by its movement rule."""
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return False
    if from_sq == to_sq:
        return False
    return MOVE_RULES[piece.piece_type](piece, from_sq, to_sq, board)

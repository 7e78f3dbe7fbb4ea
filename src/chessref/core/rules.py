"""Check detection: is a king's square reachable by an opposing piece."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessref.core.enums import Color
from chessref.core.movement import is_pseudo_legal
from chessref.core.types import Square

if TYPE_CHECKING:
    from chessref.core.board import Board


@dataclass(frozen=True, slots=True)
class CheckStatus:
    """Per-color check flags for one board."""

    white: bool = False
    black: bool = False

    @property
    def any(self) -> bool:
        return self.white or self.black

    def __getitem__(self, color: Color) -> bool:
        return self.white if color == Color.WHITE else self.black

    @property
    def answer(self) -> str:
        """Protocol answer: ``yes`` if either king is attacked."""
        return "yes" if self.any else "no"


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Every call rescans the whole board; no attack maps are cached.
    """

    @staticmethod
    def attackers(board: Board, target_sq: Square, by_color: Color) -> list[Square]:
        """Squares of *by_color* pieces whose movement rule reaches *target_sq*."""
        return [
            sq
            for sq, piece in board.occupied()
            if piece.color == by_color and is_pseudo_legal(piece, sq, target_sq, board)
        ]

    @staticmethod
    def is_in_check(board: Board, king_color: Color, king_sq: Square) -> bool:
        """Whether the *king_color* king on *king_sq* is attacked."""
        enemy = king_color.opposite
        for sq, piece in board.occupied():
            if piece.color == enemy and is_pseudo_legal(piece, sq, king_sq, board):
                return True
        return False

    @staticmethod
    def is_color_in_check(board: Board, color: Color) -> bool:
        """Whether any king of *color* on the board is attacked.

        A board without a king of that color is never in check.
        """
        return any(
            Rules.is_in_check(board, color, sq) for sq in board.king_squares(color)
        )

    @staticmethod
    def check_status(board: Board) -> CheckStatus:
        """Evaluate white's king, then black's."""
        return CheckStatus(
            white=Rules.is_color_in_check(board, Color.WHITE),
            black=Rules.is_color_in_check(board, Color.BLACK),
        )

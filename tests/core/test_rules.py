"""Tests for check detection."""

from collections.abc import Callable

import pytest

from chessref.core.board import Board
from chessref.core.enums import Color
from chessref.core.rules import CheckStatus, Rules
from chessref.core.types import parse_square

BoardFactory = Callable[..., Board]


class TestSingleAttacker:
    @pytest.mark.parametrize("attacker", ["e8", "e5", "e2", "a1", "h1"])
    def test_rook_on_open_line(self, board_with: BoardFactory, attacker: str) -> None:
        board = board_with(e1="K", **{attacker: "r"})
        assert Rules.is_in_check(board, Color.WHITE, parse_square("e1"))

    def test_rook_blocked(self, board_with: BoardFactory) -> None:
        board = board_with(e1="K", e8="r", e4="P")
        assert not Rules.is_in_check(board, Color.WHITE, parse_square("e1"))

    @pytest.mark.parametrize("blocker", ["P", "p"])
    def test_bishop_blocked_either_color(
        self, board_with: BoardFactory, blocker: str
    ) -> None:
        board = board_with(e1="K", a5="b", c3=blocker)
        assert not Rules.is_in_check(board, Color.WHITE, parse_square("e1"))

    @pytest.mark.parametrize("attacker", ["d2", "c3", "b4", "a5"])
    def test_bishop_at_distance(self, board_with: BoardFactory, attacker: str) -> None:
        board = board_with(e1="K", **{attacker: "b"})
        assert Rules.is_in_check(board, Color.WHITE, parse_square("e1"))

    def test_knight_through_wall(self, board_with: BoardFactory) -> None:
        board = board_with(e1="K", f3="n", e2="P", f2="P", d2="P")
        assert Rules.is_in_check(board, Color.WHITE, parse_square("e1"))

    def test_queen_diagonal(self, board_with: BoardFactory) -> None:
        board = board_with(e8="k", h5="Q")
        assert Rules.is_in_check(board, Color.BLACK, parse_square("e8"))

    def test_pawn_attacks_diagonally_only(self, board_with: BoardFactory) -> None:
        assert Rules.is_in_check(
            board_with(e8="k", d7="P"), Color.BLACK, parse_square("e8")
        )
        assert not Rules.is_in_check(
            board_with(e8="k", e7="P"), Color.BLACK, parse_square("e8")
        )

    def test_black_pawn_direction(self, board_with: BoardFactory) -> None:
        assert Rules.is_in_check(
            board_with(e1="K", d2="p"), Color.WHITE, parse_square("e1")
        )
        assert not Rules.is_in_check(
            board_with(e3="K", d2="p"), Color.WHITE, parse_square("e3")
        )

    def test_adjacent_kings(self, board_with: BoardFactory) -> None:
        board = board_with(e4="K", e5="k")
        assert Rules.check_status(board) == CheckStatus(white=True, black=True)

    def test_own_pieces_do_not_attack(self, board_with: BoardFactory) -> None:
        board = board_with(e1="K", e8="R")
        assert not Rules.is_in_check(board, Color.WHITE, parse_square("e1"))


class TestSymmetry:
    @pytest.mark.parametrize(
        ("king_sq", "attacker_sq", "attacker"),
        [("e1", "e8", "r"), ("d4", "g7", "b"), ("a1", "b3", "n"), ("c4", "h4", "q")],
    )
    def test_relabeled_colors_agree(
        self,
        board_with: BoardFactory,
        king_sq: str,
        attacker_sq: str,
        attacker: str,
    ) -> None:
        white_king = board_with(**{king_sq: "K", attacker_sq: attacker})
        black_king = board_with(**{king_sq: "k", attacker_sq: attacker.upper()})
        assert Rules.is_in_check(white_king, Color.WHITE, parse_square(king_sq))
        assert Rules.is_in_check(black_king, Color.BLACK, parse_square(king_sq))

    def test_check_iff_some_attacker(self, board_with: BoardFactory) -> None:
        board = board_with(e1="K", e8="r", a5="b", h4="n")
        attackers = Rules.attackers(board, parse_square("e1"), Color.BLACK)
        assert attackers == [parse_square("e8"), parse_square("a5")]
        assert Rules.is_in_check(board, Color.WHITE, parse_square("e1"))


class TestCheckStatus:
    def test_starting_position(self) -> None:
        status = Rules.check_status(Board.initial())
        assert status == CheckStatus()
        assert status.answer == "no"

    def test_only_black_in_check(self, board_with: BoardFactory) -> None:
        status = Rules.check_status(board_with(e1="K", e8="k", e4="R"))
        assert status[Color.BLACK]
        assert not status[Color.WHITE]
        assert status.answer == "yes"

    def test_missing_king_never_in_check(self, board_with: BoardFactory) -> None:
        status = Rules.check_status(board_with(e8="k", e1="Q"))
        assert status.black
        assert not status.white

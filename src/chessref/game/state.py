"""Session state — board, side to move and the history stack."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessref.core.board import Board
from chessref.core.enums import Color


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Board and side to move saved before a move was applied."""

    board: Board
    side_to_move: Color


@dataclass
class Session:
    """Mutable game context threaded through every command.

    This is a pure data/logic class — no I/O.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    history: list[HistoryEntry] = field(default_factory=list)

    # ── Initialisation ───────────────────────────────────────────────────

    def reset(self, board: Board | None = None) -> None:
        """Start over from *board* (the initial position by default)."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = Color.WHITE
        self.history.clear()

    def replace_board(self, board: Board) -> None:
        """Install a new board, keeping side to move and history."""
        self.board = board

    # ── Turn / history ───────────────────────────────────────────────────

    def switch_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite

    def push_history(self) -> None:
        """Save the current board and side to move."""
        self.history.append(HistoryEntry(self.board.copy(), self.side_to_move))

    def undo(self) -> bool:
        """Restore the most recent history entry. Returns False if empty."""
        if not self.history:
            return False
        entry = self.history.pop()
        self.board = entry.board
        self.side_to_move = entry.side_to_move
        return True

"""Shared types for the game layer: turn phases and move outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessref.core.errors import ChessrefError
    from chessref.core.move import MoveRequest
    from chessref.core.piece import Piece
    from chessref.core.rules import CheckStatus


# ── Turn FSM states ──────────────────────────────────────────────────────────


class TurnPhase(IntEnum):
    """Finite-state-machine states of one move command."""

    IDLE = auto()
    RESOLVING = auto()  # source square inspected
    VALIDATING = auto()  # movement rule, capture marker, promotion
    APPLYING = auto()  # board mutation
    REPORTING = auto()  # check scan


# ── Results ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of one move command.

    Exactly one of *error* and *check* is set.  *promotion* is the piece
    placed on the destination when the move promoted, *captured* whatever
    stood on the destination before the board was mutated.
    """

    request: MoveRequest
    check: CheckStatus | None = None
    error: ChessrefError | None = None
    promotion: Piece | None = None
    captured: Piece | None = None
    applied: bool = False

    @property
    def accepted(self) -> bool:
        return self.error is None

    @property
    def answer(self) -> str:
        """Protocol line: ``yes``/``no`` or an ``invalid`` diagnostic."""
        if self.error is not None:
            return self.error.output
        assert self.check is not None
        return self.check.answer

"""TurnController — executes protocol commands against a session.

Coordinates: Session, movement rules, check detection.
Emits events via simple callbacks so callers / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessref.config import EngineConfig
from chessref.core.board import Board
from chessref.core.enums import Color, PieceType
from chessref.core.errors import (
    CaptureMismatch,
    ChessrefError,
    IllegalMove,
    InvalidPromotion,
    NoSuchPiece,
)
from chessref.core.move import MoveRequest
from chessref.core.movement import PROMOTION_RANK, is_pseudo_legal
from chessref.core.notation import (
    BoardCommand,
    MoveCommand,
    PrintCommand,
    parse_command,
    render_board,
)
from chessref.core.piece import Piece
from chessref.core.rules import CheckStatus, Rules
from chessref.core.types import rank_of, square_name
from chessref.game.interfaces import MoveOutcome, TurnPhase
from chessref.game.state import Session

_LOGGER = logging.getLogger(__name__)

_PROMOTION_TYPES: frozenset[PieceType] = frozenset(
    {PieceType.QUEEN, PieceType.KNIGHT, PieceType.ROOK, PieceType.BISHOP}
)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome], None]
BoardCallback = Callable[[CheckStatus], None]
PhaseCallback = Callable[[TurnPhase], None]


@dataclass
class TurnEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_board_loaded: list[BoardCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController:
    """Runs one command at a time: resolves the moving piece, validates,
    mutates the board, reports check, and hands the turn over.

    Single-threaded: a command is fully processed before the next one.
    """

    __slots__ = ("_session", "_config", "_phase", "events")

    def __init__(
        self, session: Session | None = None, config: EngineConfig | None = None
    ) -> None:
        self._session = session if session is not None else Session()
        self._config = config if config is not None else EngineConfig()
        self._phase = TurnPhase.IDLE
        self.events = TurnEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> Session:
        return self._session

    @property
    def board(self) -> Board:
        return self._session.board

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    # ── Protocol entry point ─────────────────────────────────────────────

    def handle_line(self, line: str) -> str | None:
        """Consume one command line and return its output.

        ``None`` for a blank line; the rendered board for ``print``.
        """
        try:
            command = parse_command(line)
        except ChessrefError as exc:
            _LOGGER.debug("Rejected line %r: %s", line, exc)
            return exc.output

        if command is None:
            return None
        if isinstance(command, PrintCommand):
            return render_board(self.board)
        if isinstance(command, BoardCommand):
            return self.load_board(command.board).answer
        if isinstance(command, MoveCommand):
            return self.submit_move(command.request).answer
        raise TypeError(f"Unhandled command {command!r}")

    # ── Operations ───────────────────────────────────────────────────────

    def load_board(self, board: Board) -> CheckStatus:
        """Replace the board and report check for both kings."""
        self._session.replace_board(board)
        status = self._report()
        for cb in self.events.on_board_loaded:
            cb(status)
        return status

    def submit_move(self, request: MoveRequest) -> MoveOutcome:
        """Validate and apply *request*; never raises for a bad move."""
        captured: Piece | None = None
        applied = False
        try:
            self._resolve(request)
            self._validate(request)
            if self._config.validate_capture_before_apply:
                self._check_capture(request, self.board[request.to_sq])
            captured = self._apply(request)
            applied = True
            if not self._config.validate_capture_before_apply:
                self._check_capture(request, captured)
            self._set_phase(TurnPhase.REPORTING)
            outcome = MoveOutcome(
                request,
                check=self._report(),
                promotion=request.promotion,
                captured=captured,
                applied=True,
            )
        except ChessrefError as exc:
            _LOGGER.debug("Rejected %s: %s", request.command, exc)
            outcome = MoveOutcome(
                request,
                error=exc,
                promotion=request.promotion if applied else None,
                captured=captured,
                applied=applied,
            )

        if outcome.accepted or self._config.consume_turn_on_invalid:
            self._session.switch_turn()
        self._set_phase(TurnPhase.IDLE)
        self._emit_move(outcome)
        return outcome

    def undo_move(self) -> bool:
        """Restore the board and side to move saved before the last move."""
        return self._session.undo()

    # ── Internal steps ───────────────────────────────────────────────────

    def _resolve(self, request: MoveRequest) -> None:
        self._set_phase(TurnPhase.RESOLVING)
        occupant = self.board[request.from_sq]
        side = self._session.side_to_move
        if request.piece.color != side:
            raise NoSuchPiece(f"{request.piece} does not belong to {side}")
        if occupant != request.piece:
            raise NoSuchPiece(
                f"No {request.piece} on {square_name(request.from_sq)}"
                f" (found {occupant or 'nothing'})"
            )

    def _validate(self, request: MoveRequest) -> None:
        self._set_phase(TurnPhase.VALIDATING)
        to_name = square_name(request.to_sq)
        if request.promotion is not None:
            self._validate_promotion(request)
        if not is_pseudo_legal(
            request.piece, request.from_sq, request.to_sq, self.board
        ):
            raise IllegalMove(f"{request.piece} cannot reach {to_name}")
        if not request.capture and not self.board.is_empty(request.to_sq):
            raise CaptureMismatch(
                f"{to_name} is occupied but no capture was declared",
                CaptureMismatch.NO_MARKER,
            )

    def _validate_promotion(self, request: MoveRequest) -> None:
        mover = request.piece
        promotion = request.promotion
        assert promotion is not None
        if mover.piece_type != PieceType.PAWN:
            raise InvalidPromotion(f"{mover} cannot promote")
        if rank_of(request.to_sq) != PROMOTION_RANK[mover.color]:
            raise InvalidPromotion(f"{square_name(request.to_sq)} is not a last rank")
        if promotion.color != mover.color:
            raise InvalidPromotion(f"{mover} cannot promote to {promotion}")
        if promotion.piece_type not in _PROMOTION_TYPES:
            raise InvalidPromotion(f"Cannot promote to {promotion}")

    def _report(self) -> CheckStatus:
        status = Rules.check_status(self.board)
        if status.any and _LOGGER.isEnabledFor(logging.DEBUG):
            for color in Color:
                for king_sq in self.board.king_squares(color):
                    attackers = Rules.attackers(self.board, king_sq, color.opposite)
                    if attackers:
                        _LOGGER.debug(
                            "%s king on %s attacked from %s",
                            color,
                            square_name(king_sq),
                            ", ".join(square_name(sq) for sq in attackers),
                        )
        return status

    def _apply(self, request: MoveRequest) -> Piece | None:
        self._set_phase(TurnPhase.APPLYING)
        self._session.push_history()
        return self.board.move_piece(request.from_sq, request.to_sq, request.promotion)

    def _check_capture(self, request: MoveRequest, captured: Piece | None) -> None:
        # When run after _apply the board stays mutated on failure.
        if not request.capture:
            return
        if captured is None:
            raise CaptureMismatch(
                f"Nothing to capture on {square_name(request.to_sq)}",
                CaptureMismatch.NOTHING_CAPTURED,
            )
        if not request.piece.is_opponent(captured):
            raise CaptureMismatch(
                f"{request.piece} cannot capture its own {captured}",
                CaptureMismatch.SAME_COLOR,
            )

    def _set_phase(self, phase: TurnPhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(outcome)

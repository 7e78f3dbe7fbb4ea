"""Typed errors raised while decoding and executing commands.

Each error knows the protocol line it resolves to: ``"invalid"`` followed
by its diagnostic code (empty for the plain ``invalid`` answer).
"""

from __future__ import annotations


class ChessrefError(ValueError):
    """Base class for every recoverable command failure."""

    code: str = ""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code

    @property
    def output(self) -> str:
        """Protocol answer for this failure, e.g. ``invalid5``."""
        return f"invalid{self.code}"


class MalformedCommand(ChessrefError):
    """Line could not be decoded into a command."""


class MalformedSnapshot(MalformedCommand):
    """Board snapshot is not exactly 64 piece symbols or spaces."""


class NoSuchPiece(ChessrefError):
    """Source square does not hold the declared piece of the side to move."""


class IllegalMove(ChessrefError):
    """Move fails the moving piece's movement rule."""

    code = "1"


class CaptureMismatch(ChessrefError):
    """Capture marker disagrees with what stands on the destination.

    Codes: ``5`` occupied destination without marker, ``7`` marker onto an
    empty destination, ``2`` marker onto a piece of the mover's own color.
    """

    NO_MARKER = "5"
    NOTHING_CAPTURED = "7"
    SAME_COLOR = "2"

    code = NO_MARKER


class InvalidPromotion(ChessrefError):
    """Promotion onto the wrong rank, by a non-pawn, or to a disallowed piece."""

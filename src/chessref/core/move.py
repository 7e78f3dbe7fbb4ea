"""Move request value object (protocol representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessref.core.piece import Piece
from chessref.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """Immutable value object for one decoded ``M`` command."""

    piece: Piece
    from_sq: Square
    to_sq: Square
    capture: bool = False
    promotion: Piece | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.capture else ""
        base = f"{self.piece}{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += f"={self.promotion}"
        return base

    @property
    def command(self) -> str:
        """Protocol line that encodes this request."""
        return f"M{self}"

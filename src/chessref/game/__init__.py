"""Game layer — session state and the turn controller.

Quick start::

    from chessref.game import TurnController

    ctrl = TurnController()
    print(ctrl.handle_line("MPe2e4"))  # "no"
"""

from chessref.game.controller import TurnController, TurnEvents
from chessref.game.interfaces import MoveOutcome, TurnPhase
from chessref.game.state import HistoryEntry, Session

__all__ = [
    "HistoryEntry",
    "MoveOutcome",
    "Session",
    "TurnController",
    "TurnEvents",
    "TurnPhase",
]

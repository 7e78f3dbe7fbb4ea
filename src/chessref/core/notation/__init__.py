"""Notation package: board snapshots and protocol commands."""

from chessref.core.notation.commands import (
    BoardCommand,
    Command,
    MoveCommand,
    PrintCommand,
    parse_command,
    parse_move,
)
from chessref.core.notation.snapshot import (
    STARTING_SNAPSHOT,
    board_from_snapshot,
    board_to_snapshot,
    render_board,
)

__all__ = [
    "STARTING_SNAPSHOT",
    "board_from_snapshot",
    "board_to_snapshot",
    "render_board",
    "BoardCommand",
    "Command",
    "MoveCommand",
    "PrintCommand",
    "parse_command",
    "parse_move",
]

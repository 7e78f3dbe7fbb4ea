"""Command line decoding for the text protocol.

Grammar, one command per line::

    B<64 snapshot characters>
    M<piece><file><digit>[x]<file><digit>[=<promotion>]
    print
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from chessref.core.board import Board
from chessref.core.errors import MalformedCommand
from chessref.core.move import MoveRequest
from chessref.core.notation.snapshot import board_from_snapshot
from chessref.core.piece import Piece
from chessref.core.types import parse_square

BOARD_PREFIX = "B"
MOVE_PREFIX = "M"
PRINT_COMMAND = "print"

_MOVE_RE = re.compile(
    r"(?P<piece>[KQRBNPkqrbnp])"
    r"(?P<src>[a-h][1-8])"
    r"(?P<capture>x?)"
    r"(?P<dst>[a-h][1-8])"
    r"(?:=(?P<promotion>[KQRBNPkqrbnp]))?"
)


@dataclass(frozen=True, slots=True)
class BoardCommand:
    """Replace the whole board."""

    board: Board


@dataclass(frozen=True, slots=True)
class MoveCommand:
    """Move one piece."""

    request: MoveRequest


@dataclass(frozen=True, slots=True)
class PrintCommand:
    """Dump the current board."""


Command: TypeAlias = BoardCommand | MoveCommand | PrintCommand


def parse_move(text: str) -> MoveRequest:
    """Decode the body of an ``M`` command (without the prefix)."""
    match = _MOVE_RE.fullmatch(text)
    if match is None:
        raise MalformedCommand(f"Unparseable move: {text!r}")
    promotion = match["promotion"]
    return MoveRequest(
        piece=Piece.from_char(match["piece"]),
        from_sq=parse_square(match["src"]),
        to_sq=parse_square(match["dst"]),
        capture=bool(match["capture"]),
        promotion=Piece.from_char(promotion) if promotion else None,
    )


def normalize_line(line: str) -> str:
    """Drop leading whitespace and the line terminator.

    Trailing spaces are kept: they are empty squares in a snapshot.
    """
    return line.lstrip().rstrip("\r\n")


def parse_command(line: str) -> Command | None:
    """Decode one protocol line; ``None`` for a blank line."""
    text = normalize_line(line)
    if not text.strip():
        return None
    if text.rstrip() == PRINT_COMMAND:
        return PrintCommand()
    if text.startswith(BOARD_PREFIX):
        return BoardCommand(board_from_snapshot(text[1:]))
    if text.startswith(MOVE_PREFIX):
        return MoveCommand(parse_move(text[1:].rstrip()))
    raise MalformedCommand(f"Unknown command: {text!r}")

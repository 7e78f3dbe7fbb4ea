"""Command-line entry point: run a command file through the controller."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from chessref.config import EngineConfig
from chessref.game.controller import TurnController

_LOGGER = logging.getLogger(__name__)


def run_commands(
    lines: Iterable[str], controller: TurnController | None = None
) -> Iterator[str]:
    """Yield one output per command line, in input order."""
    ctrl = controller if controller is not None else TurnController()
    for line in lines:
        output = ctrl.handle_line(line)
        if output is not None:
            yield output


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessref",
        description="Check moves and board snapshots from a command file.",
    )
    parser.add_argument("path", help="file with one B/M/print command per line")
    return parser


def main(
    argv: list[str] | None = None,
    config: EngineConfig | None = None,
    out: TextIO | None = None,
) -> int:
    """Process the command file named in *argv*; return the exit status."""
    args = _build_parser().parse_args(argv)
    cfg = config if config is not None else EngineConfig()
    logging.basicConfig(level=cfg.log_level, stream=sys.stderr)
    stream = out if out is not None else sys.stdout

    try:
        handle = open(args.path, encoding="ascii", errors="replace")
    except OSError as exc:
        _LOGGER.error("Cannot open %s: %s", args.path, exc)
        return 1

    with handle:
        for output in run_commands(handle, TurnController(config=cfg)):
            print(output, file=stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())

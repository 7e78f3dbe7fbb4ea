"""Engine configuration."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

_LOGGER = logging.getLogger(__name__)

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass
class EngineConfig:
    # Flip side to move after a rejected move as well as an accepted one.
    consume_turn_on_invalid: bool = True
    # Run the capture-marker checks before the board is touched instead of after.
    validate_capture_before_apply: bool = False
    log_level: str = "WARNING"


def _coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError(f"Config key {key!r} expects a boolean, got {value!r}")


def _coerce_log_level(key: str, value: Any) -> str:
    if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
        return value.strip().upper()
    raise ValueError(f"Config key {key!r} expects a logging level, got {value!r}")


_COERCERS = {
    "consume_turn_on_invalid": _coerce_bool,
    "validate_capture_before_apply": _coerce_bool,
    "log_level": _coerce_log_level,
}


def load_config(path: str | Path = "chessref.toml") -> EngineConfig:
    """Read the ``[engine]`` table of a TOML file; defaults if it is missing.

    Library-only: the ``chessref`` command always runs with defaults, callers
    embedding the controller pass the result to ``TurnController`` or
    ``app.main``.  Values are checked against their field type and a bad one
    raises ``ValueError``; unknown keys are logged and skipped.
    """
    cfg = EngineConfig()
    path = Path(path)
    if not path.is_file():
        return cfg
    with path.open("rb") as f:
        raw = tomllib.load(f)
    known = {f.name for f in fields(cfg)}
    for key, value in raw.get("engine", {}).items():
        if key not in known:
            _LOGGER.warning("Ignoring unknown config key %r in %s", key, path)
            continue
        setattr(cfg, key, _COERCERS[key](key, value))
    return cfg

"""Tests for EngineConfig loading."""

from pathlib import Path

import pytest

from chessref.config import EngineConfig, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "none.toml") == EngineConfig()

    def test_defaults_reproduce_protocol(self) -> None:
        cfg = EngineConfig()
        assert cfg.consume_turn_on_invalid
        assert not cfg.validate_capture_before_apply

    def test_engine_table(self, tmp_path: Path) -> None:
        path = tmp_path / "chessref.toml"
        path.write_text(
            "[engine]\n"
            "consume_turn_on_invalid = false\n"
            "log_level = \"DEBUG\"\n"
            "unknown = 1\n",
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert not cfg.consume_turn_on_invalid
        assert cfg.log_level == "DEBUG"
        assert not hasattr(cfg, "unknown")

    def test_string_booleans_coerced(self, tmp_path: Path) -> None:
        path = tmp_path / "chessref.toml"
        path.write_text(
            "[engine]\n"
            "consume_turn_on_invalid = \"false\"\n"
            "validate_capture_before_apply = \"yes\"\n"
            "log_level = \"debug\"\n",
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert cfg.consume_turn_on_invalid is False
        assert cfg.validate_capture_before_apply is True
        assert cfg.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "line",
        [
            "consume_turn_on_invalid = \"maybe\"",
            "validate_capture_before_apply = 1",
            "log_level = \"LOUD\"",
            "log_level = 10",
        ],
    )
    def test_bad_values_rejected(self, tmp_path: Path, line: str) -> None:
        path = tmp_path / "chessref.toml"
        path.write_text(f"[engine]\n{line}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Config key"):
            load_config(path)

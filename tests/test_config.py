"""Tests for environment configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from wintertree.config import DEFAULT_FPS, ConfigError, load_config
from wintertree.logging_setup import configure_logging
from wintertree.models import SkyTheme


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self) -> None:
        config = load_config({})
        assert config.theme == SkyTheme.NIGHT_SKY
        assert (config.viewport.width, config.viewport.height) == (1080.0, 1920.0)
        assert config.fps == DEFAULT_FPS
        assert config.output_dir.name == "results"
        assert config.log_level == "INFO"

    def test_overrides(self) -> None:
        config = load_config(
            {
                "WINTERTREE_THEME": "Winter_Morning",
                "WINTERTREE_WIDTH": "720",
                "WINTERTREE_HEIGHT": "1280",
                "WINTERTREE_FPS": "24",
                "WINTERTREE_OUTPUT_DIR": "/tmp/frames",
                "WINTERTREE_LOG_LEVEL": "debug",
            }
        )
        assert config.theme == SkyTheme.WINTER_MORNING
        assert (config.viewport.width, config.viewport.height) == (720.0, 1280.0)
        assert config.fps == 24.0
        assert config.output_dir == Path("/tmp/frames")
        assert config.log_level == "DEBUG"

    def test_blank_number_uses_default(self) -> None:
        assert load_config({"WINTERTREE_FPS": "  "}).fps == DEFAULT_FPS

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WINTERTREE_WIDTH", "640")
        assert load_config().viewport.width == 640.0

    @pytest.mark.parametrize(
        ("name", "value", "match"),
        [
            ("WINTERTREE_THEME", "aurora", "WINTERTREE_THEME"),
            ("WINTERTREE_WIDTH", "wide", "must be a number"),
            ("WINTERTREE_HEIGHT", "-5", "must be positive"),
            ("WINTERTREE_FPS", "inf", "must be positive"),
            ("WINTERTREE_LOG_LEVEL", "LOUD", "WINTERTREE_LOG_LEVEL"),
        ],
    )
    def test_invalid_values(self, name: str, value: str, match: str) -> None:
        with pytest.raises(ConfigError, match=match):
            load_config({name: value})


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_sets_level(self) -> None:
        configure_logging("warning")
        assert logging.getLogger().level == logging.WARNING

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "wintertree.log"
        configure_logging("INFO", format_string="%(levelname)s %(message)s", filename=str(log_file))
        logging.getLogger("wintertree.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert log_file.read_text().strip() == "INFO hello"

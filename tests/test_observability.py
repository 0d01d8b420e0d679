"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from rapidcrawl_setup.core.observability.logging_config import ENV_LEVEL, resolve_level, setup_logging


class TestResolveLevel:
    def test_flags_take_precedence(self, monkeypatch):
        monkeypatch.setenv(ENV_LEVEL, "ERROR")
        assert resolve_level(debug=True) == "DEBUG"
        assert resolve_level(verbose=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv(ENV_LEVEL, "INFO")
        assert resolve_level() == "INFO"

    def test_default(self, monkeypatch):
        monkeypatch.delenv(ENV_LEVEL, raising=False)
        assert resolve_level() == "WARNING"


class TestSetupLogging:
    def test_console_level(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "setup.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("rapidcrawl_setup.test").debug("file detail")
        for handler in root.handlers:
            handler.flush()
        assert "file detail" in log_file.read_text()

    def test_file_from_env(self, tmp_path: Path, monkeypatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("RAPIDCRAWL_SETUP_LOG_FILE", str(log_file))
        setup_logging("WARNING")
        assert any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

    def test_unopenable_file_falls_back_to_console(self, tmp_path: Path, capsys):
        setup_logging("WARNING", log_file=str(tmp_path / "missing" / "setup.log"))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
        assert "Cannot open log file" in capsys.readouterr().err

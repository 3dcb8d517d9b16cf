# -*- coding: utf-8 -*-
"""Tests for setup_logger."""

import importlib
import logging
from pathlib import Path

from stock_balance import settings
from stock_balance.logger import setup_logger


class TestSetupLogger:
    """Test setup_logger function."""

    def test_console_only(self, monkeypatch):
        monkeypatch.setattr(settings, "LOG_TO_FILE", False)
        logger = setup_logger("stock_balance.test_console", "DEBUG")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, monkeypatch, tmp_path):
        monkeypatch.setattr(settings, "LOG_TO_FILE", True)
        monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
        logger = setup_logger("stock_balance.test_file")
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert (tmp_path / "logs" / "app.log").exists()
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_no_duplicate_handlers(self, monkeypatch):
        monkeypatch.setattr(settings, "LOG_TO_FILE", False)
        setup_logger("stock_balance.test_repeat")
        logger = setup_logger("stock_balance.test_repeat")
        assert len(logger.handlers) == 1


class TestLogSettings:
    """Test logging defaults in settings."""

    def test_defaults(self, monkeypatch, tmp_path):
        """File logging is off by default and the log directory follows the working directory."""
        monkeypatch.delenv("LOG_TO_FILE", raising=False)
        monkeypatch.delenv("LOG_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        try:
            importlib.reload(settings)
            assert settings.LOG_TO_FILE is False
            assert settings.LOG_DIR == Path.cwd() / "logs"
            assert settings.LOG_DIR.parent == Path.cwd()
        finally:
            monkeypatch.undo()
            importlib.reload(settings)

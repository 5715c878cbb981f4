"""Tests for logging setup."""

import logging
import sys

import pytest

from utils import logger as logger_module
from utils.logger import get_logger


@pytest.fixture
def fresh_root(monkeypatch):
    """Root logger with no handlers and logging not yet initialized."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(logger_module, "_initialized", False)
    return root


class TestGetLogger:
    def test_installs_stdout_handler(self, fresh_root):
        get_logger("recordset.test")
        assert len(fresh_root.handlers) == 1
        handler = fresh_root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout

    def test_configures_once(self, fresh_root):
        get_logger("a")
        get_logger("b")
        assert len(fresh_root.handlers) == 1

    def test_keeps_host_configuration(self, fresh_root):
        existing = logging.NullHandler()
        fresh_root.addHandler(existing)
        fresh_root.setLevel(logging.WARNING)

        get_logger("recordset.test")

        assert fresh_root.handlers == [existing]
        assert fresh_root.level == logging.WARNING

    def test_named_logger(self, fresh_root):
        assert get_logger("db.connection").name == "db.connection"

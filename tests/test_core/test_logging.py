"""Tests for objx.core.logging."""

import logging
from pathlib import Path

import pytest

from objx.core.logging import LEVEL_ENV_VAR, resolve_level, setup_logging


class TestResolveLevel:
    def test_explicit_level(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("WARNING") == logging.WARNING

    def test_default_is_info(self, monkeypatch):
        monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)
        assert resolve_level() == logging.INFO

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV_VAR, "error")
        assert resolve_level() == logging.ERROR
        assert resolve_level("debug") == logging.DEBUG

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level: CHATTY"):
            resolve_level("chatty")


class TestSetupLogging:
    def test_unknown_level_raises_even_if_configured(self):
        with pytest.raises(ValueError):
            setup_logging("chatty")

    def test_log_file(self, tmp_path: Path, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        log_file = tmp_path / "logs" / "objx.log"
        setup_logging("info", log_file)
        try:
            logging.getLogger("objx.test").info("exported 2 meshes")
            for handler in root.handlers:
                handler.flush()
            text = log_file.read_text()
            assert "| INFO     | objx.test | exported 2 meshes" in text
        finally:
            for handler in root.handlers:
                handler.close()

    def test_existing_configuration_kept(self, tmp_path: Path, monkeypatch):
        root = logging.getLogger()
        sentinel = logging.NullHandler()
        monkeypatch.setattr(root, "handlers", [sentinel])

        setup_logging("debug", tmp_path / "unused.log")
        assert root.handlers == [sentinel]
        assert not (tmp_path / "unused.log").exists()

"""
Tests for logging setup.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from protokit.backend.core.utils.config import LoggingSettings
from protokit.backend.core.utils.logging_setup import HANDLER_PREFIX, remove_handlers, setup_logging


def _own_handlers() -> list[logging.Handler]:
    return [
        h for h in logging.getLogger().handlers
        if (h.get_name() or "").startswith(HANDLER_PREFIX)
    ]


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    remove_handlers(root)
    root.setLevel(level)


class TestSetupLogging:
    def test_console_only_by_default(self) -> None:
        setup_logging()

        handlers = _own_handlers()
        assert [h.get_name() for h in handlers] == ["protokit.console"]
        assert handlers[0].level == logging.INFO

    def test_repeated_setup_replaces_handlers(self) -> None:
        setup_logging()
        setup_logging(level="DEBUG")

        handlers = _own_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG

    def test_foreign_handlers_survive(self) -> None:
        foreign = logging.NullHandler()
        root = logging.getLogger()
        root.addHandler(foreign)
        try:
            setup_logging()
            assert foreign in root.handlers
        finally:
            root.removeHandler(foreign)

    def test_file_handler_writes(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "protokit.log"
        setup_logging(LoggingSettings(level="WARNING", file=str(log_file)))

        logging.getLogger("protokit.test").debug("written to file only")
        for handler in _own_handlers():
            handler.flush()

        assert "written to file only" in log_file.read_text(encoding="utf-8")
        assert logging.getLogger().level == logging.DEBUG

    def test_quiet_loggers_held_at_warning(self) -> None:
        setup_logging(LoggingSettings(quiet=["protokit.noisy"]), level="DEBUG")
        assert logging.getLogger("protokit.noisy").level == logging.WARNING

    def test_unknown_level_raises(self) -> None:
        with pytest.raises(ValueError):
            setup_logging(level="loud")

    def test_remove_handlers_detaches(self) -> None:
        setup_logging()
        remove_handlers()
        assert _own_handlers() == []

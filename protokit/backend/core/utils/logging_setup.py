"""
Logging Setup Utilities.

The root logger gets a Rich console handler and, when ``logging.file`` is
configured, a plain-text file handler.  Handlers installed here are named
``protokit.*`` so calling :func:`setup_logging` again replaces them instead
of stacking duplicates, and handlers owned by someone else (pytest's
``caplog``, uvicorn) are left alone.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

from protokit.backend.core.utils.config import LoggingSettings, resolve_level

HANDLER_PREFIX = "protokit."

CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(level: int) -> logging.Handler:
    handler = RichHandler(show_time=False, show_path=False, rich_tracebacks=True)
    handler.set_name(HANDLER_PREFIX + "console")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(path: str | Path, level: int) -> logging.Handler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.set_name(HANDLER_PREFIX + "file")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def remove_handlers(root: logging.Logger | None = None) -> None:
    """Detach and close the handlers a previous :func:`setup_logging` installed."""
    root = root or logging.getLogger()
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()


def setup_logging(
    settings: LoggingSettings | None = None,
    *,
    level: int | str | None = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        settings: The ``logging`` config section; defaults apply when omitted
        level: Console level overriding ``settings.level`` (``--debug``, quiet
            commands)
    """
    settings = settings or LoggingSettings()
    console_level = resolve_level(settings.level if level is None else level)

    handlers = [_console_handler(console_level)]
    if settings.file:
        handlers.append(_file_handler(settings.file, resolve_level(settings.file_level)))

    root = logging.getLogger()
    remove_handlers(root)
    root.setLevel(min(handler.level for handler in handlers))
    for handler in handlers:
        root.addHandler(handler)

    for name in settings.quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

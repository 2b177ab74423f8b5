"""Logging configuration for the command-line tool."""

from __future__ import annotations

import logging
import logging.handlers
import sys

from .config import LoggingSettings

_HANDLER_MARKER = "_vocabdrill_handler"


def setup_logging(settings: LoggingSettings) -> None:
    """Configure the root logger; calling it again replaces earlier handlers."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(settings.level)

    formatter = logging.Formatter(settings.format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_MARKER, True)
    root_logger.addHandler(console_handler)

    if settings.file is not None:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            settings.file,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)

"""Logging setup driven by LoggingConfig."""

from __future__ import annotations

import logging
from pathlib import Path

from iceportal.config import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME = "iceportal.log"
CONSOLE_HANDLER_NAME = "iceportal.console"
FILE_HANDLER_NAME = "iceportal.file"
HANDLER_NAMES = (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME)


def _remove_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if handler.get_name() in HANDLER_NAMES:
            root.removeHandler(handler)
            handler.close()


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the root logger with a console handler and an optional file handler.

    Handlers installed by an earlier call are replaced, so calling this again
    does not duplicate output.
    """
    root = logging.getLogger()
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")
    root.setLevel(level)
    _remove_handlers(root)

    formatter = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler()
    console.set_name(CONSOLE_HANDLER_NAME)
    handlers: list[logging.Handler] = [console]
    if config.log_dir:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return root


__all__ = [
    "CONSOLE_HANDLER_NAME",
    "FILE_HANDLER_NAME",
    "LOG_FILENAME",
    "LOG_FORMAT",
    "configure_logging",
]

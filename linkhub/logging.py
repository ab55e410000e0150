"""Logging setup for the linkhub CLI, watcher and preview server."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "linkhub"
_CONSOLE_FORMAT = "[linkhub] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s"

# Libraries that chatter at INFO/DEBUG during watch mode.
_NOISY_LOGGERS = ("watchdog", "uvicorn.access")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the linkhub hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install console (and optional file) handlers on the ``linkhub`` logger.

    Calling this repeatedly replaces the previous handlers, so tests and
    repeated CLI invocations in one process do not duplicate output.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(level)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger


__all__ = ["configure_logging", "get_logger"]

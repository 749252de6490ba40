"""Logging utilities.

All loggers live under the ``docmerge`` namespace.  :func:`configure_logging`
attaches a single stderr handler to the package logger and may be called any
number of times; later calls only adjust the level.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "docmerge"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _StderrHandler(logging.Handler):
    """Handler writing to whatever ``sys.stderr`` is at emit time."""

    terminator = "\n"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stderr
            stream.write(self.format(record) + self.terminator)
            stream.flush()
        except Exception:
            self.handleError(record)


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Configure the package logger to emit to stderr at ``level``."""

    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]

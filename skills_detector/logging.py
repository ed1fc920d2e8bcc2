"""Logger setup for skills-detector.

Progress lines and reports go to stdout, so diagnostics are kept on stderr
(and optionally a log file) where they cannot interleave with JSON output.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_ROOT = "skills_detector"
_CONSOLE_FORMAT = "[skills-detector] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``skills_detector.<name>``, or the package logger itself."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install fresh stderr and optional file handlers on the package logger.

    Handlers from an earlier call are closed before being replaced, so
    repeated CLI invocations in one process neither duplicate output nor
    hold log files open.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    package_logger = logging.getLogger(_ROOT)
    package_logger.setLevel(level)
    package_logger.propagate = False
    _close_handlers(package_logger)

    handlers: list[logging.Handler] = [
        _handler(logging.StreamHandler(sys.stderr), level, _CONSOLE_FORMAT)
    ]
    if log_file is not None:
        handlers.append(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), level, _FILE_FORMAT)
        )
    for handler in handlers:
        package_logger.addHandler(handler)
    return package_logger


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["configure_logging", "get_logger"]

from __future__ import annotations

import logging
from typing import Optional, TextIO

PACKAGE_LOGGER_NAME = "applog"
DIAGNOSTIC_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class _DiagnosticStreamHandler(logging.StreamHandler):
    """Marker type so repeated configuration does not stack handlers."""


def configure_logging(
    *,
    level: int = logging.DEBUG,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Make the facility's own diagnostics visible.

    The ``applog`` logger records dropped entries and write failures at DEBUG.
    Nothing is emitted until a host application calls this (or configures the
    logger itself).
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    if not _has_diagnostic_handler(package_logger.handlers):
        handler = _DiagnosticStreamHandler(stream)
        handler.setFormatter(logging.Formatter(DIAGNOSTIC_LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger


def is_package_record(record: logging.LogRecord) -> bool:
    name = record.name
    return name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + ".")


def _has_diagnostic_handler(handlers: list[logging.Handler]) -> bool:
    return any(isinstance(handler, _DiagnosticStreamHandler) for handler in handlers)


__all__ = ["configure_logging", "is_package_record", "PACKAGE_LOGGER_NAME", "DIAGNOSTIC_LOG_FORMAT"]

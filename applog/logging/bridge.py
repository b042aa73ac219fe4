from __future__ import annotations

import logging

from applog.core.call_site import CallSite
from applog.core.severity import SEVERITY_MAP, Severity
from applog.logging.config import is_package_record
from applog.services.app_log import AppLog


class AppLogHandler(logging.Handler):
    """Forward stdlib log records into an AppLog file."""

    def __init__(self, app_log: AppLog, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._app_log = app_log

    @property
    def app_log(self) -> AppLog:
        return self._app_log

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        # Our own diagnostics would otherwise loop back into the file.
        if is_package_record(record):
            return
        try:
            severity = SEVERITY_MAP.get(record.levelno, Severity.NORMAL)
            call_site = CallSite(
                file=record.pathname,
                function=record.funcName or "",
                line=record.lineno,
            )
            self._app_log.report(self.format(record), severity=severity, call_site=call_site)
        except Exception:  # pragma: no cover - report() already swallows
            self.handleError(record)


def build_app_log_handler(app_log: AppLog, level: int = logging.NOTSET) -> AppLogHandler:
    return AppLogHandler(app_log, level)


__all__ = ["AppLogHandler", "build_app_log_handler"]

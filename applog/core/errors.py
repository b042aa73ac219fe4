from __future__ import annotations

from pathlib import Path


class AppLogError(Exception):
    """Base class for failures raised inside the facility.

    None of these ever reach a caller of ``AppLog.report``.
    """


class LogWriteError(AppLogError):
    """The log file could not be created, opened or written."""

    def __init__(self, message: str, *, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)


class PayloadEncodingError(AppLogError):
    """A rendered entry could not be encoded to bytes."""


__all__ = ["AppLogError", "LogWriteError", "PayloadEncodingError"]

"""Paths utilities for AppLog

- Resolves the per-user documents directory that holds log files
- Provides the canonical path for a named log file
"""
from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QStandardPaths

DEFAULT_LOG_FILENAME = "applog.txt"


def get_user_documents_dir() -> Path:
    """Return the per-user documents directory.

    Asks Qt for the platform's documents location. Falls back to ~/Documents if
    Qt reports none.
    """
    location = _qt_documents_location()
    if location:
        return Path(location)
    return Path.home() / "Documents"


def _qt_documents_location() -> str:
    return QStandardPaths.writableLocation(QStandardPaths.StandardLocation.DocumentsLocation)


def log_file_path(filename: str | os.PathLike[str], directory: str | os.PathLike[str] | None = None) -> Path:
    """Return the full path of ``filename`` inside ``directory`` (documents dir by default)."""
    base = Path(directory) if directory is not None else get_user_documents_dir()
    return base / filename


__all__ = ["DEFAULT_LOG_FILENAME", "get_user_documents_dir", "log_file_path"]

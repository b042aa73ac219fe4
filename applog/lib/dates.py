"""Locale-aware timestamps for log entries.

Uses Qt's locale database so the output follows the user's regional
conventions (e.g. ``10/19/26 1:46 PM`` for en_US, ``19.10.26 13:46`` for de_DE).
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from PySide6.QtCore import QDate, QDateTime, QLocale, QTime


def to_qdatetime(moment: datetime) -> QDateTime:
    return QDateTime(
        QDate(moment.year, moment.month, moment.day),
        QTime(moment.hour, moment.minute, moment.second, moment.microsecond // 1000),
    )


def format_short(moment: datetime, locale: Optional[QLocale] = None) -> str:
    """Return ``moment`` as a short date followed by a short time."""
    loc = locale if locale is not None else QLocale.system()
    return loc.toString(to_qdatetime(moment), QLocale.FormatType.ShortFormat)


__all__ = ["format_short", "to_qdatetime"]

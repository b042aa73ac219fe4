from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable

from applog.core.call_site import CallSite
from applog.core.severity import Severity


def describe(piece: object) -> str:
    """Human-readable text for one content piece."""
    if isinstance(piece, str):
        return piece
    if isinstance(piece, BaseException):
        return str(piece) or type(piece).__name__
    return str(piece)


def join_contents(pieces: Iterable[object]) -> str:
    """Concatenate pieces with no separator. Lists and tuples are flattened."""
    parts: list[str] = []
    for piece in pieces:
        if isinstance(piece, (list, tuple)):
            parts.append(join_contents(piece))
        else:
            parts.append(describe(piece))
    return "".join(parts)


@dataclass(frozen=True, slots=True)
class LogEntry:
    contents: str
    severity: Severity
    call_site: CallSite
    timestamp: datetime

    def render(self, date_formatter: Callable[[datetime], str]) -> str:
        return self.severity.render(self.contents, self.call_site, date_formatter(self.timestamp))


__all__ = ["LogEntry", "describe", "join_contents"]

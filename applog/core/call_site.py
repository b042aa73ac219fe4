from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from types import FrameType
from typing import Pattern

UNKNOWN_FILE = "error"
_PATH_SEPARATORS: Pattern[str] = re.compile(r"[\\/]")


def short_file(path: str | None) -> str:
    """Return the final component of a source path, or ``"error"``."""
    if not path:
        return UNKNOWN_FILE
    last = _PATH_SEPARATORS.split(path)[-1]
    return last or UNKNOWN_FILE


@dataclass(frozen=True, slots=True)
class CallSite:
    file: str
    function: str
    line: int

    @property
    def short_file(self) -> str:
        return short_file(self.file)

    @classmethod
    def from_frame(cls, frame: FrameType) -> "CallSite":
        code = frame.f_code
        return cls(file=code.co_filename, function=code.co_name, line=frame.f_lineno)

    @classmethod
    def capture(cls, stacklevel: int = 1) -> "CallSite":
        """Describe a frame above the function that calls ``capture``.

        ``stacklevel=1`` is that function's caller, matching the meaning stdlib
        ``logging`` gives the argument.
        """
        try:
            frame = sys._getframe(stacklevel + 1)
        except ValueError:
            # Stack is shallower than requested; use the outermost frame.
            frame = sys._getframe(1)
            while frame.f_back is not None:
                frame = frame.f_back
        return cls.from_frame(frame)


__all__ = ["CallSite", "short_file", "UNKNOWN_FILE"]

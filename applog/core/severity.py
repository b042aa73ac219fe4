from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

from applog.core.call_site import CallSite


class Severity(Enum):
    """Severity of a reported event. Each one has its own layout in the file."""

    #: Major failures and fatal errors. Multi-line block with a call to action.
    CRITICAL = "critical"
    #: Standard error reporting. Header line plus three tab-indented lines.
    ERROR = "error"
    #: The default. One line.
    NORMAL = "normal"
    #: Same layout as NORMAL; dropped entirely when the logger is not in debug mode.
    DEBUG = "debug"

    def render(self, contents: str, call_site: CallSite, date: str) -> str:
        file = call_site.short_file
        function = call_site.function
        line = call_site.line

        if self is Severity.CRITICAL:
            return (
                "\n\n--- CRITICAL ---\n\n"
                f"{contents}\n\n"
                f"DATE: {date}\n\n"
                f"SENDER-FILE: {file}\n"
                f"SENDER-FUNCTION: {function}\n"
                f"SENDER-LINE: {line}\n\n"
                "IMMEDIATE ACTION REQUIRED\n\n"
                "--- END CRITICAL ---\n"
            )
        if self is Severity.ERROR:
            return (
                "ERROR:\n"
                f"\t{contents}\n"
                f"\tDATE: {date}\n"
                f"\tSENDER: {file}, {function}, {line}"
            )
        return f"{date}, {file}, {function}, {line} --- {contents}"


SEVERITY_MAP: Mapping[int, Severity] = {
    logging.DEBUG: Severity.DEBUG,
    logging.INFO: Severity.NORMAL,
    logging.WARNING: Severity.NORMAL,
    logging.ERROR: Severity.ERROR,
    logging.CRITICAL: Severity.CRITICAL,
}


__all__ = ["Severity", "SEVERITY_MAP"]

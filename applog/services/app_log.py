from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from applog.core.call_site import CallSite
from applog.core.entry import LogEntry, join_contents
from applog.core.errors import AppLogError
from applog.core.severity import Severity
from applog.lib.dates import format_short
from applog.lib.paths import DEFAULT_LOG_FILENAME, log_file_path
from applog.storage.text_file import append_entry

logger = logging.getLogger(__name__)


class AppLog:
    """Writes human-readable entries to a single text file.

    Every ``report`` call opens, appends to and closes the file; no handle is
    kept between calls. Reporting never raises: write failures are dropped so
    logging cannot disrupt the host application.

    ``debug`` defaults to the interpreter's ``__debug__`` flag, so running under
    ``python -O`` turns DEBUG entries into no-ops.
    """

    def __init__(
        self,
        filename: str = DEFAULT_LOG_FILENAME,
        *,
        directory: str | os.PathLike[str] | None = None,
        debug: Optional[bool] = None,
        clock: Optional[Callable[[], datetime]] = None,
        date_formatter: Optional[Callable[[datetime], str]] = None,
    ) -> None:
        self._filename = filename
        self._directory = Path(directory) if directory is not None else None
        self._debug = __debug__ if debug is None else debug
        self._clock = clock or datetime.now
        self._date_formatter = date_formatter or format_short

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def file_path(self) -> Path:
        return log_file_path(self._filename, self._directory)

    def report(
        self,
        *contents: object,
        severity: Severity = Severity.NORMAL,
        call_site: Optional[CallSite] = None,
        stacklevel: int = 1,
    ) -> None:
        """Append one entry to the log file.

        - contents: strings and/or exceptions, joined without a separator.
          Exceptions contribute their message.
        - severity: selects the layout of the entry.
        - call_site: where the report comes from. Captured from the calling
          frame when omitted; ``stacklevel`` walks further up like it does for
          stdlib logging.
        """
        if severity is Severity.DEBUG and not self._debug:
            return
        try:
            site = call_site if call_site is not None else CallSite.capture(stacklevel)
            entry = LogEntry(
                contents=join_contents(contents),
                severity=severity,
                call_site=site,
                timestamp=self._clock(),
            )
            append_entry(self.file_path, self.render(entry))
        except AppLogError as exc:
            logger.debug("Dropped log entry: %s", exc)
        except Exception:
            logger.debug("Dropped log entry", exc_info=True)

    def render(self, entry: LogEntry) -> str:
        return entry.render(self._date_formatter)

    def __repr__(self) -> str:
        return f"AppLog(filename={self._filename!r}, debug={self._debug!r})"


__all__ = ["AppLog"]

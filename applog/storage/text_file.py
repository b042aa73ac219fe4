from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from applog.core.errors import LogWriteError, PayloadEncodingError

ENCODING = "utf-8"
ENTRY_SEPARATOR = "\n"
ENCODING_FAILURE_TEXT = "ERROR CONVERTING TO DATA"
# What open() would give a new file before the umask applies; mkstemp uses 0600.
NEW_FILE_MODE = 0o666

logger = logging.getLogger(__name__)


def encode_payload(text: str) -> bytes:
    try:
        return text.encode(ENCODING)
    except UnicodeError as exc:
        raise PayloadEncodingError(str(exc)) from exc


def safe_payload(text: str) -> bytes:
    """Encode ``text``, substituting a fixed sentinel when it cannot be encoded."""
    try:
        return encode_payload(text)
    except PayloadEncodingError as exc:
        logger.debug("Log entry could not be encoded: %s", exc)
        return ENCODING_FAILURE_TEXT.encode(ENCODING)


def append_entry(path: Path, entry: str) -> None:
    """Append one rendered entry to ``path``, creating the file when absent.

    Existing files get a newline separator before the entry; a new file holds
    exactly the entry. When encoding fails the sentinel replaces the whole
    payload, separator included. Raises LogWriteError on any filesystem failure.
    """
    try:
        if not path.exists() and _create_atomically(path, safe_payload(entry)):
            return
        with path.open("ab") as handle:
            handle.write(safe_payload(ENTRY_SEPARATOR + entry))
    except OSError as exc:
        raise LogWriteError(f"Unable to write log file: {exc}", path=path) from exc


def _create_atomically(path: Path, payload: bytes) -> bool:
    """Publish a fully written file at ``path``.

    Returns False, writing nothing, when ``path`` appeared in the meantime so
    the caller appends instead of clobbering it.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        os.chmod(tmp_name, NEW_FILE_MODE & ~current_umask())
        try:
            os.link(tmp_name, path)
        except FileExistsError:
            return False
        except (AttributeError, NotImplementedError, PermissionError):
            # No hard links on this filesystem. The existence race is unsupported here.
            os.replace(tmp_name, path)
        return True
    finally:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass


def current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


__all__ = ["append_entry", "encode_payload", "safe_payload", "current_umask", "ENCODING_FAILURE_TEXT"]

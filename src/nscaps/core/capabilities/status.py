"""Reading effective capabilities and UIDs from process status records.

The kernel publishes per-process information in ``/proc/<pid>/status`` as
newline-separated ``key:\\tvalue`` records. Two of them matter here:

- ``CapEff:`` the effective capability set, as hexadecimal digits with the
  most significant digit first (``0000003fffffffff``).
- ``Uid:`` real, effective, saved and filesystem UID, tab-separated.

A process whose status cannot be read is reported as having no known
capabilities rather than as a failure: processes exit at any time and
reading other users' status files may be denied.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from nscaps.core.capabilities.names import caps_to_names

logger = logging.getLogger(__name__)

PROC_ROOT: str = "/proc"
"""Mount point of the proc filesystem."""

_HEX_TOKEN = re.compile(r"[0-9a-fA-F]+")
_WORD_DIGITS = 8


def _record(status_text: str, key: str) -> str | None:
    """Return the value of the first ``key:`` record, if present."""
    for line in status_text.splitlines():
        name, sep, value = line.partition(":")
        if sep and name == key:
            return value
    return None


def _token_words(token: str) -> list[int]:
    """Split one big-endian hex token into 32-bit words, least significant first."""
    width = -(-len(token) // _WORD_DIGITS) * _WORD_DIGITS
    padded = token.rjust(width, "0")
    words = [
        int(padded[pos:pos + _WORD_DIGITS], 16)
        for pos in range(0, width, _WORD_DIGITS)
    ]
    words.reverse()
    return words


def parse_effective_caps(status_text: str) -> list[int]:
    """Extract the effective capability words from a status text.

    Each hex token of the ``CapEff:`` record is a big-endian number that may
    span several 32-bit words. Multiple whitespace-separated tokens are
    taken in order, the first token covering the lowest capability bits.

    Args:
        status_text: Contents of a ``/proc/<pid>/status`` file.

    Returns:
        32-bit words, least significant word first. Empty when the record
        is missing or malformed.
    """
    value = _record(status_text, "CapEff")
    if value is None:
        return []
    words: list[int] = []
    for token in value.split():
        if not _HEX_TOKEN.fullmatch(token):
            logger.debug("Malformed CapEff token %r", token)
            return []
        words.extend(_token_words(token))
    return words


def parse_effective_uid(status_text: str) -> int | None:
    """Extract the effective UID (second ``Uid:`` column) from a status text."""
    value = _record(status_text, "Uid")
    if value is None:
        return None
    fields = value.split()
    if len(fields) < 2 or not fields[1].isascii() or not fields[1].isdigit():
        logger.debug("Malformed Uid record %r", value)
        return None
    return int(fields[1])


def read_status(pid: int, proc_root: str | Path = PROC_ROOT) -> str | None:
    """Read the complete status record of process ``pid``.

    Args:
        pid: Process ID.
        proc_root: Mount point of the proc filesystem.

    Returns:
        The status text, or None if it cannot be read.
    """
    path = Path(proc_root) / str(pid) / "status"
    try:
        with path.open(encoding="utf-8", errors="replace") as status:
            return status.read()
    except OSError as exc:
        logger.debug("Cannot read status of PID %s: %s", pid, exc)
        return None


def process_effective_caps(pid: int, proc_root: str | Path = PROC_ROOT) -> list[int]:
    """Return the effective capability words of process ``pid``."""
    status_text = read_status(pid, proc_root)
    if status_text is None:
        return []
    return parse_effective_caps(status_text)


def process_effective_uid(pid: int, proc_root: str | Path = PROC_ROOT) -> int | None:
    """Return the effective UID of process ``pid``, or None if unknown."""
    status_text = read_status(pid, proc_root)
    if status_text is None:
        return None
    return parse_effective_uid(status_text)


def capabilities_of(pid: int, proc_root: str | Path = PROC_ROOT) -> list[str]:
    """Return the names of the effective capabilities of process ``pid``.

    Never raises: an unreadable or malformed status yields an empty list.
    """
    return caps_to_names(process_effective_caps(pid, proc_root))

"""Record-by-record parsing of log files.

Records may span several lines when written indented, so the file is read as
a stream of concatenated JSON texts rather than line by line.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Iterator

from pydantic import ValidationError

from .models import LogEntry

_WHITESPACE = re.compile(r"[ \t\n\r]*")
_decoder = json.JSONDecoder()


class LogFormatError(ValueError):
    """Raised when log file content is not a sequence of entry records."""

    def __init__(self, reason: str, offset: int) -> None:
        super().__init__(f"{reason} (at offset {offset})")
        self.reason = reason
        self.offset = offset


def _scan(text: str) -> Iterator[tuple[int, dict[str, Any]]]:
    pos = _WHITESPACE.match(text, 0).end()
    while pos < len(text):
        start = pos
        try:
            record, pos = _decoder.raw_decode(text, pos)
        except json.JSONDecodeError as exc:
            raise LogFormatError(exc.msg, exc.pos) from exc
        if not isinstance(record, dict):
            raise LogFormatError("record is not a JSON object", start)
        yield start, record
        pos = _WHITESPACE.match(text, pos).end()


def iter_records(text: str) -> Iterator[dict[str, Any]]:
    """Yield each JSON object in ``text`` in order."""
    for _, record in _scan(text):
        yield record


def read_entries(path: str | Path) -> list[LogEntry]:
    """Parse every entry in the log file at ``path``."""
    text = Path(path).read_text(encoding="utf-8")
    entries: list[LogEntry] = []
    for offset, record in _scan(text):
        try:
            entries.append(LogEntry.from_record(record))
        except ValidationError as exc:
            raise LogFormatError(f"not a log entry: {exc.error_count()} invalid field(s)", offset) from exc
    return entries

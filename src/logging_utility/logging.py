"""Side diagnostic channel: structured JSON lines on stderr."""

from __future__ import annotations

import json
import sys
import time
from pathlib import Path
from typing import Any


def log_event(
    event: str,
    *,
    level: str = "info",
    **extra: Any,
) -> None:
    """Write a structured JSON log line to stderr."""
    record: dict[str, Any] = {
        "ts": time.time(),
        "level": level,
        "event": event,
    }
    record.update(extra)
    try:
        print(json.dumps(record, default=str), file=sys.stderr)
    except Exception:
        pass  # the side channel must not crash the caller either


def report_failure(path: Path, error: BaseException) -> None:
    """Report a failed log write. Never written to the log file itself."""
    log_event(
        "log_write_failed",
        level="error",
        path=str(path),
        error_type=type(error).__name__,
        error=str(error),
    )

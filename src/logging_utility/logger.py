"""Structured logger that appends JSON entries to a single file."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Any

import aiofiles

from .config import Settings
from .levels import LogLevel
from .logging import report_failure
from .models import LogEntry


class Logger:
    """Appends timestamped, leveled JSON entries to ``path``.

    The parent directory and the file are created at construction; errors
    there propagate. Once constructed, writes never raise: a failed append is
    reported on stderr and dropped. Appends on one instance are serialized
    so records from concurrent tasks stay whole.
    """

    def __init__(self, path: str | Path, *, indent: int | None = 2) -> None:
        self.path = Path(path)
        self.indent = indent
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None
        self.ensure_log_file_path_exists()

    @classmethod
    def from_settings(cls, settings: Settings) -> Logger:
        return cls(settings.log_path, indent=settings.indent)

    def ensure_log_file_path_exists(self) -> None:
        """Create the parent directory and an empty file if missing. Never truncates."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8"):
            pass

    def _write_lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def append(
        self,
        message: str,
        level: LogLevel = LogLevel.INFORMATION,
        extra: Any = None,
    ) -> None:
        """Write one entry. Failures go to the side channel, not the caller."""
        try:
            entry = LogEntry.create(message, level, extra)
            text = entry.to_json(indent=self.indent) + os.linesep
            async with self._write_lock():
                async with aiofiles.open(self.path, mode="a", encoding="utf-8", newline="") as f:
                    await f.write(text)
        except Exception as exc:
            report_failure(self.path, exc)

    async def debug(self, message: str, extra: Any = None) -> None:
        await self.append(message, LogLevel.DEBUG, extra)

    async def info(self, message: str, extra: Any = None) -> None:
        await self.append(message, LogLevel.INFORMATION, extra)

    async def warn(self, message: str, extra: Any = None) -> None:
        await self.append(message, LogLevel.WARNING, extra)

    warning = warn

    async def error(self, message: str, extra: Any = None) -> None:
        await self.append(message, LogLevel.ERROR, extra)

    async def critical(self, message: str, extra: Any = None) -> None:
        await self.append(message, LogLevel.CRITICAL, extra)

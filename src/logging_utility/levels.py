"""Severity levels attached to log entries."""

from __future__ import annotations

from enum import Enum


class LogLevel(str, Enum):
    """Named severity of an entry. Written as its value; never filtered."""

    DEBUG = "Debug"
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"

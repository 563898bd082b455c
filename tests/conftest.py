"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from logging_utility.logger import Logger


@pytest.fixture()
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "application.log"


@pytest.fixture()
def logger(log_path: Path) -> Logger:
    return Logger(log_path)

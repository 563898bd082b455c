"""Tests for the log entry model."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import timedelta

import pytest
from pydantic import ValidationError

from logging_utility.levels import LogLevel
from logging_utility.models import LogEntry


@dataclass
class ErrorDetails:
    ErrorCode: int
    Details: str


def test_level_values_are_names() -> None:
    assert [level.value for level in LogLevel] == [
        "Debug",
        "Information",
        "Warning",
        "Error",
        "Critical",
    ]


def test_create_stamps_utc() -> None:
    entry = LogEntry.create("hello")
    assert entry.level is LogLevel.INFORMATION
    assert entry.extra is None
    assert entry.timestamp.utcoffset() == timedelta(0)


def test_json_keys_in_order() -> None:
    record = json.loads(LogEntry.create("hello", LogLevel.WARNING).to_json())
    assert list(record) == ["Timestamp", "Level", "Message", "AdditionalData"]
    assert record["Level"] == "Warning"
    assert record["AdditionalData"] is None


def test_indent_controls_layout() -> None:
    entry = LogEntry.create("hello")
    assert "\n" in entry.to_json(indent=2)
    assert "\n" not in entry.to_json(indent=None)


def test_message_is_escaped() -> None:
    entry = LogEntry.create('quote " and\nnewline')
    parsed = LogEntry.from_json(entry.to_json(indent=None))
    assert parsed.message == 'quote " and\nnewline'


@pytest.mark.parametrize(
    "extra",
    [None, 42, 1.5, "text", True, [1, "two", None], {"code": 500, "nested": {"ok": False}}],
)
def test_round_trip(extra: object) -> None:
    entry = LogEntry.create("msg", LogLevel.ERROR, extra)
    parsed = LogEntry.from_json(entry.to_json())
    assert parsed.message == "msg"
    assert parsed.level is LogLevel.ERROR
    assert parsed.extra == extra
    assert parsed.timestamp == entry.timestamp


def test_dataclass_extra_serializes_as_object() -> None:
    entry = LogEntry.create("boom", LogLevel.ERROR, ErrorDetails(123, "Something went wrong"))
    record = json.loads(entry.to_json())
    assert record["AdditionalData"] == {"ErrorCode": 123, "Details": "Something went wrong"}


def test_entry_is_frozen() -> None:
    entry = LogEntry.create("hello")
    with pytest.raises(ValidationError):
        entry.message = "changed"


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValidationError):
        LogEntry.from_record(
            {"Timestamp": "2024-01-01T00:00:00Z", "Level": "Fatal", "Message": "x"}
        )

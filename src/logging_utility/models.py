"""Log entry model and its JSON record shape."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .levels import LogLevel


class LogEntry(BaseModel):
    """One structured record, built at write time and never mutated.

    Field aliases are the on-disk key names. ``extra`` accepts anything
    pydantic can serialize to JSON: primitives, mappings, sequences,
    dataclasses or models.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: datetime = Field(alias="Timestamp")
    level: LogLevel = Field(alias="Level")
    message: str = Field(alias="Message")
    extra: Any = Field(default=None, alias="AdditionalData")

    @classmethod
    def create(
        cls,
        message: str,
        level: LogLevel = LogLevel.INFORMATION,
        extra: Any = None,
    ) -> LogEntry:
        return cls(
            timestamp=datetime.now(timezone.utc),
            level=level,
            message=message,
            extra=extra,
        )

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON object keyed Timestamp, Level, Message, AdditionalData."""
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, text: str) -> LogEntry:
        return cls.model_validate_json(text)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> LogEntry:
        return cls.model_validate(record)

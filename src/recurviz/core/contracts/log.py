"""LogEntry: immutable, append-only record of the narration stream."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogType = Literal["info", "success", "error", "system"]


def _wall_clock() -> str:
    return datetime.now().strftime("%H:%M:%S")


class LogEntry(BaseModel):
    """A single narration line shown in the log panel."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: str = Field(default_factory=_wall_clock, description="Local time, HH:MM:SS.")
    message: str
    type: LogType = "info"


__all__ = ["LogEntry", "LogType"]

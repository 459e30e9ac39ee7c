"""Pydantic contracts for the recorded visualizer state."""

from __future__ import annotations

from .frame import Frame, FrameStatus
from .log import LogEntry, LogType
from .memory import MemorySlot, slot_address
from .snapshot import Snapshot
from .stack import CallStackEntry
from .view import AlgorithmType, PlaybackView, RunSummary

__all__ = [
    "AlgorithmType",
    "CallStackEntry",
    "Frame",
    "FrameStatus",
    "LogEntry",
    "LogType",
    "MemorySlot",
    "PlaybackView",
    "RunSummary",
    "Snapshot",
    "slot_address",
]

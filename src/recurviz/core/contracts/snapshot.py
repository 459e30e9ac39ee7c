"""
Snapshot definition.

A snapshot is the immutable record of the whole visualizer state at one
commit point: the call tree (flat frame list plus root id), the full memory
slot array, the call stack, the log and the highlighted source line.

Design Notes
------------
- **Value semantics**: snapshots are built from deep copies of the live
  objects. No snapshot shares mutable storage with the live model or with any
  other snapshot, so every historical step stays valid while the run goes on.
- **Immutability**: the model is ``frozen``; field reassignment raises.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .frame import Frame
from .log import LogEntry
from .memory import MemorySlot
from .stack import CallStackEntry


class Snapshot(BaseModel):
    """Immutable record of the visualizer state at one commit."""

    model_config = ConfigDict(frozen=True)

    frames: list[Frame] = Field(default_factory=list)
    root_id: str | None = None
    memory: list[MemorySlot] = Field(default_factory=list)
    stack: list[CallStackEntry] = Field(default_factory=list)
    logs: list[LogEntry] = Field(default_factory=list)
    active_line: int = Field(default=-1, description="Highlighted source line, -1 for none.")

    def frame(self, frame_id: str) -> Frame | None:
        """Return the frame with ``frame_id``, or None."""
        for f in self.frames:
            if f.id == frame_id:
                return f
        return None

    def root(self) -> Frame | None:
        """Return the root frame of the run, if one exists yet."""
        return self.frame(self.root_id) if self.root_id else None

    def occupied_indices(self) -> set[int]:
        """Indices of memory slots currently owned by a live call."""
        return {i for i, slot in enumerate(self.memory) if slot.is_occupied}

    def open_frames(self) -> list[Frame]:
        """Frames that have not completed yet."""
        return [f for f in self.frames if f.is_open]


__all__ = ["Snapshot"]

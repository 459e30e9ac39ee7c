"""
Authoritative live state of a recording session.

Tracked structures
------------------
Call tree, stack memory, call stack and log. ``snapshot()`` deep-copies all
of them, so no snapshot shares a mutable object with the live state.

Design Goals
------------
- **Single owner**: exactly one ``LiveState`` per controller. Runners mutate
  it; everybody else only ever sees :class:`Snapshot` copies.
- **Minimal API**: push/pop on the call stack, ``log`` for narration,
  ``finish_frame`` for the completed-transition bookkeeping, ``snapshot``.
"""

from __future__ import annotations

from recurviz.core.contracts.frame import FrameStatus
from recurviz.core.contracts.log import LogEntry, LogType
from recurviz.core.contracts.snapshot import Snapshot
from recurviz.core.contracts.stack import CallStackEntry
from recurviz.core.model.call_tree import CallTree
from recurviz.core.model.stack_memory import StackMemory


class LiveState:
    """
    Mutable state a runner writes to between commits.

    Attributes
    ----------
    memory : StackMemory
        Simulated stack slots, indexed by depth.
    tree : CallTree
        Frames of the current run; allocates memory on frame creation.
    stack : list[CallStackEntry]
        In-flight calls, innermost last.
    logs : list[LogEntry]
        Append-only narration stream.
    """

    __slots__ = ("memory", "tree", "stack", "logs")

    def __init__(self, capacity: int = 64) -> None:
        self.memory = StackMemory(capacity)
        self.tree = CallTree(self.memory)
        self.stack: list[CallStackEntry] = []
        self.logs: list[LogEntry] = []

    # ------------------------------ Mutations -------------------------------

    def push_call(self, entry: CallStackEntry) -> None:
        self.stack.append(entry)

    def pop_call(self) -> CallStackEntry:
        return self.stack.pop()

    def log(self, message: str, type: LogType = "info") -> LogEntry:
        """Append a narration line and return it."""
        entry = LogEntry(message=message, type=type)
        self.logs.append(entry)
        return entry

    def finish_frame(self, frame_id: str, **fields: object) -> None:
        """Move a frame to ``completed``, free its slot and pop its stack entry."""
        frame = self.tree.update_frame(frame_id, status=FrameStatus.COMPLETED, **fields)
        self.memory.free(frame.depth)
        self.pop_call()

    def clear(self) -> None:
        """Drop the tree, stack and log; free every memory slot."""
        self.tree.clear()
        self.memory.clear()
        self.stack.clear()
        self.logs.clear()

    # ------------------------------ Snapshots -------------------------------

    def snapshot(self, active_line: int = -1) -> Snapshot:
        """
        Capture an independent, immutable copy of the current state.

        Parameters
        ----------
        active_line : int
            Source line index to highlight at this step (-1 for none).
        """
        return Snapshot(
            frames=[f.model_copy(deep=True) for f in self.tree.frames()],
            root_id=self.tree.root_id,
            memory=[s.model_copy(deep=True) for s in self.memory.slots()],
            stack=[e.model_copy(deep=True) for e in self.stack],
            logs=[e.model_copy(deep=True) for e in self.logs],
            active_line=active_line,
        )


__all__ = ["LiveState"]

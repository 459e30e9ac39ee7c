"""
Call-tree model for a single recursive run.

The tree is stored as a flat, creation-ordered list of :class:`Frame`
objects with parent → child links kept in ``Frame.children``. There is a
single root per run. Frames are only ever added or updated, never removed,
until :meth:`CallTree.clear` discards the whole run.

Creating a frame also claims its stack-memory slot, so the memory grid and
the tree cannot drift apart at frame creation.
"""

from __future__ import annotations

import uuid
from typing import Any

from recurviz.core.contracts.frame import Frame, FrameStatus
from recurviz.core.model.stack_memory import StackMemory


class CallTree:
    """Mutable forest of frames (one root per run)."""

    def __init__(self, memory: StackMemory) -> None:
        self._memory = memory
        self._frames: dict[str, Frame] = {}
        self.root_id: str | None = None

    def create_frame(self, name: str, args: str, parent_id: str | None, depth: int) -> str:
        """
        Allocate a new ``active`` frame and return its id.

        Parameters
        ----------
        name, args:
            Display label and rendered arguments (e.g. ``"fact"``, ``"n=3"``).
        parent_id:
            Caller frame id; ``None`` registers the new frame as the root.
        depth:
            1-based recursion depth; also selects the memory slot to claim.
        """
        frame_id = uuid.uuid4().hex
        self._frames[frame_id] = Frame(
            id=frame_id, name=name, args=args, status=FrameStatus.ACTIVE, depth=depth
        )
        if parent_id is not None:
            self._frames[parent_id].children.append(frame_id)
        else:
            self.root_id = frame_id
        self._memory.allocate(depth, frame_id, f"{name}({args})")
        return frame_id

    def update_frame(self, frame_id: str, **fields: Any) -> Frame:
        """Merge ``fields`` into the frame; unspecified fields stay untouched.

        Passing ``note=None`` clears the note. Transition legality is not
        checked here. Raises ``KeyError`` for an unknown ``frame_id``.
        """
        updated = self._frames[frame_id].model_copy(update=fields)
        self._frames[frame_id] = updated
        return updated

    def get(self, frame_id: str) -> Frame:
        return self._frames[frame_id]

    def frames(self) -> list[Frame]:
        """Frames in creation order."""
        return list(self._frames.values())

    def __len__(self) -> int:
        return len(self._frames)

    def clear(self) -> None:
        self._frames.clear()
        self.root_id = None


__all__ = ["CallTree"]

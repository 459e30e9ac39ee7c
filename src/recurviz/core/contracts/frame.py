"""Frame contract: one node of the recursion call tree.

A frame is created when a recursive call begins (before its base-case check)
and is never deleted within a run; the finished tree is the permanent record
of that run.

Lifecycle
---------
``active`` (on creation) → ``pending`` (waiting on a child call) → ``active``
(combining child results) → ``returning`` (value attached) → ``completed``.
Base-case frames skip ``pending``. The model itself does not police these
transitions; the instrumented runners drive them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class FrameStatus(str, Enum):
    """Lifecycle status of a call-tree frame."""

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    RETURNING = "returning"


class Frame(BaseModel):
    """A single recursive call as shown in the call tree."""

    id: str = Field(..., description="Unique id, stable for the run.")
    name: str = Field(..., description="Function label, e.g. 'fib'.")
    args: str = Field(..., description="Human-readable arguments, e.g. 'n=3'.")
    return_value: str | None = Field(default=None, description="Rendered result, once known.")
    note: str | None = Field(
        default=None, description="Transient annotation, e.g. 'Base Case' or '5 * 24'."
    )
    children: list[str] = Field(
        default_factory=list, description="Child frame ids in call order."
    )
    status: FrameStatus = Field(default=FrameStatus.ACTIVE)
    depth: int = Field(..., ge=1, description="1-based recursion depth; the root is 1.")

    @property
    def is_open(self) -> bool:
        """True while the call still owns a stack slot (not yet completed)."""
        return self.status is not FrameStatus.COMPLETED


__all__ = ["Frame", "FrameStatus"]

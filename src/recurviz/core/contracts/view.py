"""Contracts shared with presentation layers (terminal, HTTP clients).

``PlaybackView`` bundles everything a renderer consumes: the displayed
snapshot plus the player state (step counters, in-progress flag, selection
and speed). ``RunSummary`` is what a finished run reports back.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .snapshot import Snapshot


class AlgorithmType(str, Enum):
    """The built-in recursive algorithms."""

    FACTORIAL = "FACTORIAL"
    FIBONACCI = "FIBONACCI"
    POWER = "POWER"
    PALINDROME = "PALINDROME"


class PlaybackView(BaseModel):
    """Read-only view of the controller, as handed to a presentation layer."""

    snapshot: Snapshot
    current_step: int = Field(default=0, ge=0)
    total_steps: int = Field(default=0, ge=0)
    in_progress: bool = False
    algorithm: AlgorithmType | None = None
    raw_input: str | None = None
    speed: float = 1.0
    instant: bool = False


class RunSummary(BaseModel):
    """Outcome of a finished run."""

    algorithm: AlgorithmType
    argument: str = Field(..., description="The coerced input actually used.")
    result: str = Field(..., description="Rendered return value of the root call.")
    steps: int = Field(..., ge=0, description="Number of recorded snapshots.")


__all__ = ["AlgorithmType", "PlaybackView", "RunSummary"]

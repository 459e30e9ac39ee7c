"""
Request/response schemas for the RecurViz HTTP API.

The API is the collaboration boundary with a browser presentation layer:
the client invokes commands (select/run/reset/speed/seek) and reads back a
:class:`PlaybackView`. Refused commands are not errors; they come back with
``accepted=false`` and a human-readable ``detail``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from recurviz.core.contracts.view import PlaybackView


class RunRequest(BaseModel):
    """Start a run on a session."""

    algorithm: str = Field(..., description="Algorithm name, e.g. 'factorial' or 'fib'.")
    input: str | int | None = Field(
        default=None, description="Numeric input, or the string for palindrome."
    )
    speed: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Optional speed to apply before the run starts.",
    )


class SpeedRequest(BaseModel):
    speed: float = Field(
        ..., allow_inf_nan=False, description="Pacing multiplier; 99 or more is instant."
    )


class SeekRequest(BaseModel):
    step: int = Field(..., description="0-based history index to display.")


class CommandResponse(BaseModel):
    """Outcome of a command plus the resulting view."""

    accepted: bool
    detail: str | None = None
    view: PlaybackView


class SessionInfo(BaseModel):
    session_id: str
    view: PlaybackView


class AlgorithmInfo(BaseModel):
    """Public description of a built-in algorithm."""

    name: str
    title: str
    input_kind: str
    default_input: int | str
    max_input: int | None
    source: str


__all__ = [
    "RunRequest",
    "SpeedRequest",
    "SeekRequest",
    "CommandResponse",
    "SessionInfo",
    "AlgorithmInfo",
]

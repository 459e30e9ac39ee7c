"""CallStackEntry: transient LIFO record of an in-flight call."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field


class CallStackEntry(BaseModel):
    """One entry of the call stack panel.

    Pushed when a call begins (one step before its frame is created) and
    popped when that frame completes.
    """

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    function_name: str
    args: dict[str, int | str] = Field(default_factory=dict)
    line: int | None = None
    highlight: bool = False

    def signature(self) -> str:
        """Render as ``name(k=v, ...)`` for compact displays."""
        rendered = ", ".join(f"{k}={v}" for k, v in self.args.items())
        return f"{self.function_name}({rendered})"


__all__ = ["CallStackEntry"]

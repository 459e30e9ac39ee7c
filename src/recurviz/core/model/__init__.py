"""Live, mutable model objects: the call tree and the simulated stack memory."""

from __future__ import annotations

from .call_tree import CallTree
from .stack_memory import StackMemory

__all__ = ["CallTree", "StackMemory"]

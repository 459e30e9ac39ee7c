"""
Simulated stack memory.

A fixed-capacity array of :class:`MemorySlot` indexed by recursion depth:
the call at depth ``d`` owns slot ``d - 1`` for as long as its frame is not
completed. Slots are reused by later calls at the same depth.

Overflow policy
---------------
Depths outside ``[1, capacity]`` are silently ignored by both ``allocate`` and
``free``; the visualization clips instead of failing. Runners clamp their
inputs so real runs stay well inside the default 64 slots.
"""

from __future__ import annotations

from recurviz.core.contracts.memory import MemorySlot


class StackMemory:
    """Depth-indexed slot array modelling activation-record allocation."""

    __slots__ = ("_slots",)

    def __init__(self, capacity: int = 64) -> None:
        self._slots: list[MemorySlot] = [MemorySlot.free_slot(i) for i in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _index(self, depth: int) -> int | None:
        idx = depth - 1
        return idx if 0 <= idx < len(self._slots) else None

    def allocate(self, depth: int, frame_id: str, value: str) -> None:
        """Mark slot ``depth - 1`` as owned by ``frame_id``."""
        idx = self._index(depth)
        if idx is None:
            return
        self._slots[idx] = self._slots[idx].model_copy(
            update={"is_occupied": True, "frame_id": frame_id, "value": value, "depth": depth}
        )

    def free(self, depth: int) -> None:
        """Return slot ``depth - 1`` to its unoccupied default."""
        idx = self._index(depth)
        if idx is None:
            return
        self._slots[idx] = MemorySlot.free_slot(idx)

    def slots(self) -> list[MemorySlot]:
        """The live slot list (callers snapshot it before handing it out)."""
        return self._slots

    def occupied_indices(self) -> set[int]:
        return {i for i, slot in enumerate(self._slots) if slot.is_occupied}

    def clear(self) -> None:
        """Free every slot."""
        self._slots = [MemorySlot.free_slot(i) for i in range(len(self._slots))]


__all__ = ["StackMemory"]

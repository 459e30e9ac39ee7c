"""
Snapshot store: the replayable history of one run.

Append-only during a run, random access afterwards. Index 0 is the state
right after the first commit. Out-of-range lookups are reported through
:class:`Result` instead of raising, so the playback layer can treat a bad
seek as a no-op.
"""

from __future__ import annotations

from collections.abc import Iterator

from recurviz.core.contracts.snapshot import Snapshot
from recurviz.core.result import Result, err, ok


class SnapshotStore:
    """Ordered, append-only sequence of immutable snapshots."""

    __slots__ = ("_snapshots",)

    def __init__(self) -> None:
        self._snapshots: list[Snapshot] = []

    def append(self, snap: Snapshot) -> int:
        """Store ``snap`` and return its step index."""
        self._snapshots.append(snap)
        return len(self._snapshots) - 1

    def at(self, step: int) -> Result[Snapshot, str]:
        """Return the snapshot at ``step``, or an error when out of range."""
        if 0 <= step < len(self._snapshots):
            return ok(self._snapshots[step])
        return err(f"step {step} out of range (0..{len(self._snapshots) - 1})")

    def last(self) -> Snapshot | None:
        return self._snapshots[-1] if self._snapshots else None

    def snapshots(self) -> tuple[Snapshot, ...]:
        """Return the full history as an immutable tuple."""
        return tuple(self._snapshots)

    def clear(self) -> None:
        self._snapshots.clear()

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(tuple(self._snapshots))


__all__ = ["SnapshotStore"]

"""Recording layer: live state and the snapshot history."""

from __future__ import annotations

from .history import SnapshotStore
from .live import LiveState

__all__ = ["LiveState", "SnapshotStore"]

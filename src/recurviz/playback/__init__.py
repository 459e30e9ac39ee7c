from __future__ import annotations

from .controller import INSTANT_SPEED, SPEED_PRESETS, PlaybackController

__all__ = ["PlaybackController", "INSTANT_SPEED", "SPEED_PRESETS"]

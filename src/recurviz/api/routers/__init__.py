from __future__ import annotations

from . import playback

__all__ = ["playback"]

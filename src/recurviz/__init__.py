"""RecurViz: step-by-step recording and playback of simple recursive algorithms.

The package records every semantically meaningful step of a recursive call
(call tree, simulated stack memory, call stack, log, highlighted source line)
as an immutable snapshot, and replays the history at a chosen pace.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"

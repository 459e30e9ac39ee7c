"""Core package initializer for RecurViz.

Holds the data contracts, the live model (call tree and stack memory), the
recording layer (live state and snapshot store), settings and the Result type.
"""

from __future__ import annotations

__all__ = ["__doc__"]

# src/recurviz/api/background.py
"""
Background task runner for paced algorithm runs.

The router claims the session's controller with ``PlaybackController.start``
before answering ``POST .../run``; FastAPI then schedules
:func:`run_session_task` after the response has been sent, so a client can
poll the session view while the run commits step by step.
"""

from __future__ import annotations

from collections.abc import Coroutine
from typing import Any

from recurviz.core.contracts.view import RunSummary
from recurviz.core.settings import get_logger

logger = get_logger("recurviz.api")


async def run_session_task(
    session_id: str, pending: Coroutine[Any, Any, RunSummary]
) -> None:
    """
    Await a run that was already started on the session's controller.

    It never raises to the caller: unexpected failures are logged here with
    their traceback. The controller releases its in-progress flag either way.
    """
    try:
        summary = await pending
    except Exception:
        logger.exception("Run failed for session %s", session_id)
        return

    logger.info("Session %s finished %s = %s", session_id, summary.algorithm.value, summary.result)


__all__ = ["run_session_task"]

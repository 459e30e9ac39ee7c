"""
Playback controller: runs, paces, records and scrubs algorithm executions.

Responsibilities
----------------
- **Run**: reset the live state, execute one instrumented algorithm to
  completion and record a snapshot at every commit point. ``start`` claims
  the controller synchronously and hands back the coroutine to await, so a
  caller that schedules the run for later (an HTTP background task) still
  reserves it immediately.
- **Pace**: after each commit, suspend for ``base_delay / speed`` seconds,
  or not at all in instant mode. Commits are recorded and pushed to
  subscribers either way.
- **Scrub**: ``seek`` / ``step_forward`` / ``step_back`` / ``replay`` show
  recorded snapshots without touching the history or the live model.

Concurrency model
-----------------
Single-threaded and cooperative (``asyncio``). Exactly one run is in flight
at a time; the runner only suspends inside :meth:`PlaybackController.commit`,
so mutation plus snapshot capture is atomic with respect to any observer and
no locking is needed. There is no cancellation: while busy, ``run``,
``reset``, ``seek`` and ``select`` are refused with an ``Err`` and change
nothing.
"""

from __future__ import annotations

import asyncio
import math
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

from recurviz.algorithms.registry import ALGORITHM_REGISTRY, resolve
from recurviz.algorithms.runner import run_algorithm
from recurviz.core.contracts.snapshot import Snapshot
from recurviz.core.contracts.view import AlgorithmType, PlaybackView, RunSummary
from recurviz.core.recording.history import SnapshotStore
from recurviz.core.recording.live import LiveState
from recurviz.core.result import Result, err, ok
from recurviz.core.settings import Settings, get_logger, load_settings

logger = get_logger("recurviz.playback")

#: Speed multiplier at or above which commits are not paced at all.
INSTANT_SPEED = 99.0
SPEED_PRESETS: tuple[float, ...] = (1.0, 2.0, 5.0, INSTANT_SPEED)

Subscriber = Callable[[Snapshot, int], None]
SleepFn = Callable[[float], Awaitable[Any]]


class PlaybackController:
    """
    Owner of the live state, the snapshot history and the player state.

    Parameters
    ----------
    settings:
        Configuration to read the pacing delay, memory capacity and initial
        speed from; defaults to the cached process settings.
    sleep:
        Awaitable used for pacing; defaults to :func:`asyncio.sleep`. Tests
        inject a recorder here to observe delays without waiting.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        sleep: SleepFn | None = None,
    ) -> None:
        cfg = settings if settings is not None else load_settings()
        self._base_delay: float = cfg.base_delay_ms / 1000.0
        self._sleep: SleepFn = sleep if sleep is not None else asyncio.sleep
        self.speed: float = cfg.default_speed

        self.live = LiveState(cfg.memory_slots)
        self._history = SnapshotStore()
        self._subscribers: list[Subscriber] = []

        self.in_progress: bool = False
        self.selected: AlgorithmType | None = None
        self.raw_input: str | None = None

        self.live.log("Recursion engine ready.", "system")
        self._display: Snapshot = self.live.snapshot()
        self._current_step: int = 0

    # ------------------------------ Read API --------------------------------

    @property
    def instant(self) -> bool:
        return self.speed >= INSTANT_SPEED

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def total_steps(self) -> int:
        return len(self._history)

    @property
    def displayed(self) -> Snapshot:
        """The snapshot currently shown to presentation layers."""
        return self._display

    @property
    def history(self) -> tuple[Snapshot, ...]:
        return self._history.snapshots()

    def delay(self) -> float:
        """Seconds the next commit will pause for (0.0 in instant mode)."""
        return 0.0 if self.instant else self._base_delay / self.speed

    def view(self) -> PlaybackView:
        """Everything a presentation layer needs to draw the current state."""
        return PlaybackView(
            snapshot=self._display,
            current_step=self._current_step,
            total_steps=len(self._history),
            in_progress=self.in_progress,
            algorithm=self.selected,
            raw_input=self.raw_input,
            speed=self.speed,
            instant=self.instant,
        )

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback(snapshot, step)`` for live commits.

        Returns a function that removes the subscription again.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    # ------------------------------ Commands --------------------------------

    def select(
        self, algorithm: AlgorithmType | str, raw_input: object = None
    ) -> Result[AlgorithmType, str]:
        """Choose the algorithm (and optionally its input) for the next run.

        Switching to a different algorithm without an input drops the old
        input, so the next run uses the new algorithm's default.
        """
        if self.in_progress:
            return self._reject("cannot change selection while a run is in progress")
        kind = resolve(algorithm)
        if raw_input is not None:
            self.raw_input = str(raw_input)
        elif kind is not self.selected:
            self.raw_input = None
        self.selected = kind
        return ok(kind)

    def set_speed(self, multiplier: float) -> Result[float, str]:
        """Set the pacing multiplier; values >= ``INSTANT_SPEED`` mean instant.

        Allowed mid-run: the new speed applies from the next commit on.
        """
        if not math.isfinite(multiplier) or multiplier <= 0:
            return self._reject(f"speed must be a positive number, got {multiplier}")
        self.speed = float(multiplier)
        logger.debug("Speed set to %.2fx%s", self.speed, " (instant)" if self.instant else "")
        return ok(self.speed)

    def reset(self) -> Result[None, str]:
        """Clear tree, memory, stack, log and history back to initial values."""
        if self.in_progress:
            return self._reject("cannot reset while a run is in progress")
        self._clear()
        self.live.log("Visualization reset.", "system")
        self._display = self.live.snapshot()
        return ok(None)

    def seek(self, step: int) -> Result[Snapshot, str]:
        """Display the recorded snapshot at ``step``; a pure display operation."""
        if self.in_progress:
            return self._reject("cannot seek while a run is in progress")
        found = self._history.at(step)
        if found.is_err():
            return self._reject(found.unwrap_err())
        self._display = found.unwrap()
        self._current_step = step
        return found

    def step_forward(self) -> Result[Snapshot, str]:
        return self.seek(self._current_step + 1)

    def step_back(self) -> Result[Snapshot, str]:
        return self.seek(self._current_step - 1)

    def start(
        self, algorithm: AlgorithmType | str | None = None, raw_input: object = None
    ) -> Result[Coroutine[Any, Any, RunSummary], str]:
        """
        Claim the controller for a run and return the coroutine that executes it.

        The live state and history are cleared and ``in_progress`` is set
        before this returns, so any command issued before the coroutine is
        first awaited is already refused. The caller must await the returned
        coroutine; the flag is released when it finishes.

        Without ``algorithm`` the current selection and its input are used.
        With ``algorithm`` and no ``raw_input``, the algorithm's default input
        applies. Unknown algorithm names raise ``KeyError``.
        """
        if self.in_progress:
            return self._reject("run already in progress")
        if algorithm is None:
            if self.selected is None:
                return self._reject("no algorithm selected")
            kind = self.selected
            raw = raw_input if raw_input is not None else self.raw_input
        else:
            kind = resolve(algorithm)
            raw = raw_input

        self.selected = kind
        self.raw_input = None if raw is None else str(raw)
        self._clear()
        self.in_progress = True
        return ok(self._execute(kind, raw))

    async def run(
        self, algorithm: AlgorithmType | str | None = None, raw_input: object = None
    ) -> Result[RunSummary, str]:
        """
        Execute ``algorithm`` (or the current selection) to completion.

        A run that starts while another is in flight is refused and changes
        nothing. Unknown algorithm names raise ``KeyError``.
        """
        started = self.start(algorithm, raw_input)
        if started.is_err():
            return err(started.unwrap_err())
        return ok(await started.unwrap())

    async def _execute(self, kind: AlgorithmType, raw: object) -> RunSummary:
        algo = ALGORITHM_REGISTRY[kind]
        logger.info("Run started: %s (input=%r, speed=%.2fx)", algo.title, raw, self.speed)
        try:
            arg, value = await run_algorithm(algo, raw, self)
        finally:
            self.in_progress = False

        summary = RunSummary(
            algorithm=kind,
            argument=algo.describe_input(arg),
            result=algo.render(value),
            steps=len(self._history),
        )
        logger.info(
            "Run finished: %s(%s) = %s in %d steps",
            algo.title,
            summary.argument,
            summary.result,
            summary.steps,
        )
        return summary

    async def replay(self, start: int = 0) -> Result[int, str]:
        """Walk the recorded history from ``start`` to the end at the current pace.

        Each step is displayed and pushed to subscribers like a live commit.
        Returns the index of the last step shown.
        """
        if self.in_progress:
            return self._reject("cannot replay while a run is in progress")
        if self._history.at(start).is_err():
            return self._reject(f"step {start} out of range")
        self.in_progress = True
        try:
            for step in range(start, len(self._history)):
                snap = self._history.at(step).unwrap()
                self._show(snap, step)
                await self._pause()
        finally:
            self.in_progress = False
        return ok(self._current_step)

    # ------------------------------ Recorder --------------------------------

    async def commit(self, line: int) -> None:
        """Freeze the live state at ``line``, record and show it, then pace."""
        snap = self.live.snapshot(line)
        step = self._history.append(snap)
        logger.debug("Commit #%d at line %d (%d frames)", step, line, len(snap.frames))
        self._show(snap, step)
        await self._pause()

    # ------------------------------ Internals -------------------------------

    def _show(self, snap: Snapshot, step: int) -> None:
        self._display = snap
        self._current_step = step
        for callback in list(self._subscribers):
            callback(snap, step)

    async def _pause(self) -> None:
        if self.instant:
            return
        await self._sleep(self._base_delay / self.speed)

    def _clear(self) -> None:
        self.live.clear()
        self._history.clear()
        self._current_step = 0

    def _reject(self, reason: str) -> Result[Any, str]:
        logger.warning("Rejected: %s", reason)
        return err(reason)


__all__ = ["PlaybackController", "INSTANT_SPEED", "SPEED_PRESETS", "Subscriber"]

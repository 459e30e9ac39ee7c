"""Shared fixtures and helpers for the RecurViz test-suite."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from recurviz.core.contracts.view import RunSummary
from recurviz.core.settings import Settings
from recurviz.playback.controller import INSTANT_SPEED, PlaybackController


class SleepRecorder:
    """Stand-in for ``asyncio.sleep`` that records requested delays."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


def make_settings(**overrides: Any) -> Settings:
    """Settings with deterministic pacing, independent of the process env."""
    values: dict[str, Any] = {
        "RECURVIZ_BASE_DELAY_MS": 400,
        "RECURVIZ_MEMORY_SLOTS": 64,
        "RECURVIZ_DEFAULT_SPEED": 1.0,
    }
    values.update(overrides)
    return Settings(**values)


def run_to_end(controller: PlaybackController, algorithm: str, raw: object = None) -> RunSummary:
    """Drive one run synchronously and unwrap its summary."""
    return asyncio.run(controller.run(algorithm, raw)).unwrap()


@pytest.fixture  # type: ignore[misc]
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture  # type: ignore[misc]
def controller(sleeper: SleepRecorder) -> PlaybackController:
    """A controller in instant mode with an observable sleep."""
    ctl = PlaybackController(settings=make_settings(), sleep=sleeper)
    ctl.set_speed(INSTANT_SPEED)
    return ctl

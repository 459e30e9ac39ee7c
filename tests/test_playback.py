"""Controller behavior: exclusivity, pacing, seek and reset."""

from __future__ import annotations

import asyncio

import pytest

from conftest import SleepRecorder, make_settings, run_to_end
from recurviz.core.contracts.snapshot import Snapshot
from recurviz.core.contracts.view import AlgorithmType
from recurviz.playback.controller import INSTANT_SPEED, PlaybackController


def test_new_controller_is_idle_and_ready() -> None:
    ctl = PlaybackController(settings=make_settings())
    view = ctl.view()
    assert not view.in_progress
    assert view.total_steps == 0 and view.current_step == 0
    assert view.algorithm is None
    assert [e.message for e in view.snapshot.logs] == ["Recursion engine ready."]
    assert view.snapshot.frames == [] and view.snapshot.active_line == -1


def test_second_run_is_refused_while_one_is_in_flight(sleeper: SleepRecorder) -> None:
    """A paced run yields at every commit; a second run issued meanwhile is refused."""
    controller = PlaybackController(settings=make_settings(), sleep=sleeper)
    controller.set_speed(5)

    async def _both() -> tuple[object, object]:
        first = asyncio.create_task(controller.run("factorial", 3))
        await asyncio.sleep(0)
        assert controller.in_progress
        second = await controller.run("fibonacci", 5)
        return await first, second

    first, second = asyncio.run(_both())
    assert first.is_ok()  # type: ignore[attr-defined]
    assert second.is_err()  # type: ignore[attr-defined]
    assert controller.selected is AlgorithmType.FACTORIAL
    assert controller.history[-1].root().return_value == "6"  # type: ignore[union-attr]
    assert not controller.in_progress


def test_commands_are_refused_mid_run(controller: PlaybackController) -> None:
    refusals: list[bool] = []

    def _poke(_snap: Snapshot, step: int) -> None:
        if step == 3:
            refusals.append(controller.reset().is_err())
            refusals.append(controller.seek(0).is_err())
            refusals.append(controller.select("power").is_err())
            refusals.append(controller.step_back().is_err())

    controller.subscribe(_poke)
    summary = run_to_end(controller, "factorial", 4)

    assert refusals == [True, True, True, True]
    assert summary.steps == 22
    assert controller.selected is AlgorithmType.FACTORIAL


def test_instant_mode_never_sleeps(controller: PlaybackController, sleeper: SleepRecorder) -> None:
    run_to_end(controller, "fibonacci", 4)
    assert controller.instant
    assert controller.delay() == 0.0
    assert sleeper.calls == []


def test_pacing_follows_speed(sleeper: SleepRecorder) -> None:
    ctl = PlaybackController(settings=make_settings(), sleep=sleeper)
    ctl.set_speed(2)
    summary = run_to_end(ctl, "factorial", 2)
    assert len(sleeper.calls) == summary.steps
    assert all(s == pytest.approx(0.2) for s in sleeper.calls)


def test_speed_change_applies_from_next_commit(sleeper: SleepRecorder) -> None:
    ctl = PlaybackController(settings=make_settings(), sleep=sleeper)

    def _speed_up(_snap: Snapshot, step: int) -> None:
        if step == 1:
            ctl.set_speed(INSTANT_SPEED)

    ctl.subscribe(_speed_up)
    summary = run_to_end(ctl, "factorial", 3)

    assert summary.steps > 2
    assert sleeper.calls == [pytest.approx(0.4)], "only the first commit was paced"


def test_set_speed_rejects_non_positive(controller: PlaybackController) -> None:
    assert controller.set_speed(0).is_err()
    assert controller.set_speed(-1).is_err()
    assert controller.speed == INSTANT_SPEED
    assert controller.set_speed(5).unwrap() == 5.0
    assert not controller.instant


def test_seek_is_a_pure_display_operation(controller: PlaybackController) -> None:
    run_to_end(controller, "factorial", 4)
    history = controller.history
    live_before = controller.live.snapshot(history[-1].active_line)

    first = controller.seek(5).unwrap()
    again = controller.seek(5).unwrap()
    assert first is again is history[5]
    assert controller.current_step == 5
    assert controller.displayed is history[5]

    assert controller.history == history
    assert controller.live.snapshot(history[-1].active_line) == live_before


@pytest.mark.parametrize("step", [-1, 22, 999])  # type: ignore[misc]
def test_seek_out_of_range_changes_nothing(controller: PlaybackController, step: int) -> None:
    run_to_end(controller, "factorial", 4)
    controller.seek(3)
    assert controller.seek(step).is_err()
    assert controller.current_step == 3
    assert controller.total_steps == 22


def test_last_snapshot_matches_live_state(controller: PlaybackController) -> None:
    run_to_end(controller, "palindrome", "level")
    last = controller.history[-1]
    assert last == controller.live.snapshot(last.active_line)
    assert controller.displayed is last
    assert controller.current_step == controller.total_steps - 1


def test_step_forward_and_back(controller: PlaybackController) -> None:
    run_to_end(controller, "power", 2)
    controller.seek(0)
    assert controller.step_back().is_err()
    assert controller.step_forward().is_ok()
    assert controller.current_step == 1
    controller.seek(controller.total_steps - 1)
    assert controller.step_forward().is_err()


def test_reset_restores_initial_state(controller: PlaybackController) -> None:
    run_to_end(controller, "fibonacci", 3)
    assert controller.reset().is_ok()

    view = controller.view()
    assert view.total_steps == 0 and view.current_step == 0
    snap = view.snapshot
    assert snap.frames == [] and snap.stack == []
    assert snap.occupied_indices() == set()
    assert [e.message for e in snap.logs] == ["Visualization reset."]
    assert all(s.address for s in snap.memory)


def test_new_run_discards_previous_run(controller: PlaybackController) -> None:
    run_to_end(controller, "fibonacci", 4)
    old_ids = {f.id for f in controller.history[-1].frames}

    summary = run_to_end(controller, "factorial", 2)
    final = controller.history[-1]
    assert summary.steps == controller.total_steps == 10
    assert not old_ids & {f.id for f in final.frames}
    assert not any("Combine" in e.message for e in final.logs)


def test_run_uses_selection(controller: PlaybackController) -> None:
    assert asyncio.run(controller.run()).is_err()

    assert controller.select("pow", 3).unwrap() is AlgorithmType.POWER
    summary = asyncio.run(controller.run()).unwrap()
    assert summary.result == "8" and summary.argument == "3"
    assert controller.raw_input == "3"


def test_unknown_algorithm_raises(controller: PlaybackController) -> None:
    with pytest.raises(KeyError):
        asyncio.run(controller.run("quicksort", 3))
    with pytest.raises(KeyError):
        controller.select("quicksort")
    assert not controller.in_progress


def test_replay_walks_history_and_notifies(controller: PlaybackController) -> None:
    run_to_end(controller, "factorial", 2)
    seen: list[int] = []
    controller.subscribe(lambda _snap, step: seen.append(step))

    last = asyncio.run(controller.replay(4)).unwrap()
    assert last == controller.total_steps - 1
    assert seen == list(range(4, controller.total_steps))
    assert asyncio.run(controller.replay(999)).is_err()


def test_unsubscribe_stops_notifications(controller: PlaybackController) -> None:
    seen: list[int] = []
    stop = controller.subscribe(lambda _snap, step: seen.append(step))
    run_to_end(controller, "factorial", 1)
    stop()
    run_to_end(controller, "factorial", 1)
    assert seen == [0, 1, 2, 3]


def test_run_without_input_uses_the_new_algorithms_default(
    controller: PlaybackController,
) -> None:
    run_to_end(controller, "factorial", "10")
    summary = run_to_end(controller, "palindrome")
    assert summary.argument == '"racecar"' and summary.result == "true"
    assert controller.raw_input is None


def test_select_switching_algorithm_drops_old_input(controller: PlaybackController) -> None:
    controller.select("factorial", 10)
    controller.select("fibonacci")
    assert controller.raw_input is None
    assert asyncio.run(controller.run()).unwrap().argument == "4"

    controller.select("fibonacci", 6)
    controller.select("fibonacci")
    assert controller.raw_input == "6", "re-selecting the same algorithm keeps its input"


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])  # type: ignore[misc]
def test_set_speed_rejects_non_finite(controller: PlaybackController, bad: float) -> None:
    assert controller.set_speed(bad).is_err()
    assert controller.speed == INSTANT_SPEED


def test_start_reserves_the_controller_before_the_run_is_awaited(
    controller: PlaybackController,
) -> None:
    pending = controller.start("factorial", 3).unwrap()
    assert controller.in_progress
    assert controller.total_steps == 0
    assert controller.start("power").is_err()
    assert asyncio.run(controller.run("power")).is_err()
    assert controller.reset().is_err()

    summary = asyncio.run(pending)
    assert summary.result == "6"
    assert not controller.in_progress


def _fingerprint(snap: Snapshot) -> tuple[object, ...]:
    return (
        snap.active_line,
        tuple((f.args, f.status, f.note, f.return_value) for f in snap.frames),
        len(snap.stack),
        frozenset(snap.occupied_indices()),
        tuple(e.message for e in snap.logs),
    )


@pytest.mark.parametrize(
    ("name", "raw"), [("fibonacci", 4), ("palindrome", "level"), ("factorial", 3)]
)  # type: ignore[misc]
def test_instant_and_paced_runs_record_the_same_steps(
    sleeper: SleepRecorder, name: str, raw: object
) -> None:
    paced = PlaybackController(settings=make_settings(), sleep=sleeper)
    paced.set_speed(1)
    run_to_end(paced, name, raw)

    instant = PlaybackController(settings=make_settings(), sleep=sleeper)
    instant.set_speed(INSTANT_SPEED)
    run_to_end(instant, name, raw)

    assert len(sleeper.calls) == paced.total_steps
    assert [_fingerprint(s) for s in paced.history] == [
        _fingerprint(s) for s in instant.history
    ]

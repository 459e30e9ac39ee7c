"""
Instrumented recursive runner shared by every algorithm descriptor.

Each call walks the same state machine and commits a snapshot after every
semantically meaningful mutation::

    push stack entry           commit(entry)
    create frame (active)      commit(entry)
    base case?
      yes: returning + value   commit(base.line)
           completed           commit(base.line)
      no:  pending             commit(recurse)
           child 1 ... child k (between children: active "resume" commit)
           active + note       commit(combine)
           returning + value   commit(combine)
           completed           commit(combine)

Children run strictly one after another, so the commit order is the
depth-first call order and the recorded history is deterministic.
"""

from __future__ import annotations

from typing import Any, Protocol

from recurviz.algorithms.base import RecursiveAlgorithm
from recurviz.core.contracts.frame import FrameStatus
from recurviz.core.contracts.stack import CallStackEntry
from recurviz.core.recording.live import LiveState


class Recorder(Protocol):
    """What a runner needs from its host: the live state and a commit point."""

    live: LiveState

    async def commit(self, line: int) -> None:
        """Freeze the live state at ``line``; may suspend for pacing."""


async def run_call(
    algo: RecursiveAlgorithm[Any, Any],
    arg: Any,
    parent_id: str | None,
    depth: int,
    recorder: Recorder,
) -> Any:
    """Execute one instrumented call and return its (unrendered) value."""
    live = recorder.live
    lines = algo.lines

    live.push_call(
        CallStackEntry(
            function_name=algo.function_name,
            args=algo.stack_args(arg),
            line=lines.entry,
            highlight=True,
        )
    )
    await recorder.commit(lines.entry)

    frame_id = live.tree.create_frame(algo.frame_name, algo.frame_args(arg), parent_id, depth)
    await recorder.commit(lines.entry)

    base = algo.base_case(arg)
    if base is not None:
        if base.log:
            live.log(base.log, "info")
        live.tree.update_frame(
            frame_id,
            status=FrameStatus.RETURNING,
            return_value=algo.render(base.value),
            note=base.note,
        )
        await recorder.commit(base.line)

        live.finish_frame(frame_id, note=None)
        await recorder.commit(base.line)
        return base.value

    live.tree.update_frame(frame_id, status=FrameStatus.PENDING, note=algo.pending_note(arg))
    await recorder.commit(lines.recurse)

    results: list[Any] = []
    for i, sub in enumerate(algo.subproblems(arg)):
        if i > 0:
            live.tree.update_frame(frame_id, status=FrameStatus.ACTIVE, note=algo.resume_note)
            await recorder.commit(lines.resume if lines.resume is not None else lines.recurse)
            live.tree.update_frame(frame_id, status=FrameStatus.PENDING)
        results.append(await run_call(algo, sub, frame_id, depth + 1, recorder))

    value = algo.combine(arg, results)
    live.tree.update_frame(
        frame_id, status=FrameStatus.ACTIVE, note=algo.combine_note(arg, results)
    )
    if (line := algo.combine_log(arg, results, value)) is not None:
        live.log(*line)
    await recorder.commit(lines.combine)

    live.tree.update_frame(
        frame_id, status=FrameStatus.RETURNING, return_value=algo.render(value), note=None
    )
    if (line := algo.return_log(arg, value)) is not None:
        live.log(*line)
    await recorder.commit(lines.combine)

    live.finish_frame(frame_id)
    await recorder.commit(lines.combine)
    return value


async def run_algorithm(
    algo: RecursiveAlgorithm[Any, Any], raw_input: object, recorder: Recorder
) -> tuple[Any, Any]:
    """Coerce ``raw_input``, announce the run and execute it from the root.

    Returns
    -------
    tuple
        ``(argument, value)``: the coerced argument actually used and the
        root call's return value.
    """
    arg = algo.coerce_input(raw_input)
    recorder.live.log(f"Preparing to run: {algo.title}({algo.describe_input(arg)})", "system")
    value = await run_call(algo, arg, None, 1, recorder)
    return arg, value


__all__ = ["Recorder", "run_call", "run_algorithm"]

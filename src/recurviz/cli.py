# src/recurviz/cli.py
"""
RecurViz Command Line Interface (CLI).

This module implements the terminal front end using `typer` and `rich`. It
is a thin presentation layer over :class:`PlaybackController`: every command
builds a controller, drives it, and renders snapshots it reads back.

Features
--------
- **Live Runs**: watch the call tree grow and unwind at 1x/2x/5x or instantly.
- **Timeline Trace**: list every recorded step with its highlighted line.
- **Seek**: render the state at any recorded step of a run.
- **Source Listings**: print the canonical listing each step refers to.

Usage
-----
    $ recurviz run factorial 5 --live --speed 2
    $ recurviz trace fibonacci 3
    $ recurviz show palindrome level --step 7
"""

from __future__ import annotations

import asyncio
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

from recurviz.algorithms.base import RecursiveAlgorithm
from recurviz.algorithms.registry import all_algorithms, get_algorithm
from recurviz.core.contracts.snapshot import Snapshot
from recurviz.core.contracts.view import RunSummary
from recurviz.playback.controller import INSTANT_SPEED, PlaybackController
from recurviz.render import render_source, render_view

load_dotenv()

app = typer.Typer(
    help="RecurViz: step through recursive algorithms, one snapshot at a time.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _lookup(name: str) -> RecursiveAlgorithm[Any, Any]:
    """Resolve an algorithm name or exit with code 1."""
    try:
        return get_algorithm(name)
    except KeyError as e:
        console.print(f"[bold red]❌ {e.args[0]}[/bold red]")
        raise typer.Exit(code=1) from e


def _parse_speed(raw: str) -> float:
    """Map ``max``/``instant`` to the instant speed; otherwise a positive float."""
    if raw.strip().lower() in {"max", "instant"}:
        return INSTANT_SPEED
    try:
        value = float(raw)
    except ValueError as e:
        raise typer.BadParameter(f"expected a number or 'max', got {raw!r}") from e
    if value <= 0:
        raise typer.BadParameter("speed must be positive")
    return value


def _record(
    algo: RecursiveAlgorithm[Any, Any], value: str | None, speed: float = INSTANT_SPEED
) -> tuple[PlaybackController, RunSummary]:
    """Run ``algo`` to completion on a fresh controller."""
    controller = PlaybackController()
    controller.set_speed(speed)
    summary = asyncio.run(controller.run(algo.kind, value)).unwrap()
    return controller, summary


def _print_summary(summary: RunSummary) -> None:
    console.print(
        Panel.fit(
            f"Result: [bold green]{summary.result}[/bold green] (steps: {summary.steps})",
            title=f"{summary.algorithm.value.title()}({summary.argument})",
            border_style="green",
        )
    )


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def algorithms() -> None:
    """List the built-in algorithms with their input limits."""
    table = Table(title="Algorithms")
    table.add_column("Name", style="bold")
    table.add_column("Input")
    table.add_column("Default")
    table.add_column("Max")
    for algo in all_algorithms():
        table.add_row(
            algo.kind.value.lower(),
            algo.input_kind,
            str(algo.default_input),
            "-" if algo.max_input is None else str(algo.max_input),
        )
    console.print(table)


@app.command()  # type: ignore[misc]
def source(
    algorithm: Annotated[str, typer.Argument(help="Algorithm name, e.g. 'fibonacci'.")],
) -> None:
    """Print the source listing the highlighted line indices refer to."""
    algo = _lookup(algorithm)
    console.print(Panel(render_source(algo), title=algo.title))


@app.command()  # type: ignore[misc]
def run(
    algorithm: Annotated[str, typer.Argument(help="Algorithm name, e.g. 'factorial'.")],
    value: Annotated[
        str | None,
        typer.Argument(help="Input: a number, or a string for palindrome."),
    ] = None,
    speed: Annotated[
        str | None,
        typer.Option(
            "--speed",
            "-s",
            help="Pacing multiplier (1, 2, 5, ...) or 'max' for instant.",
        ),
    ] = None,
    live: Annotated[
        bool,
        typer.Option("--live/--no-live", "-l", help="Animate every step while recording."),
    ] = False,
) -> None:
    """
    Record one run and print the final state.

    With `--live` the dashboard is redrawn at every commit, paced by
    `--speed` (default: configured speed). Without it the run is instant.
    """
    algo = _lookup(algorithm)
    controller = PlaybackController()
    if speed is not None:
        controller.set_speed(_parse_speed(speed))
    elif not live:
        controller.set_speed(INSTANT_SPEED)

    if live:
        with Live(render_view(algo, controller.view()), console=console) as screen:

            def _redraw(_snap: Snapshot, _step: int) -> None:
                screen.update(render_view(algo, controller.view()))

            controller.subscribe(_redraw)
            result = asyncio.run(controller.run(algo.kind, value))
    else:
        result = asyncio.run(controller.run(algo.kind, value))

    summary = result.unwrap()
    console.print(render_view(algo, controller.view()))
    _print_summary(summary)


@app.command()  # type: ignore[misc]
def trace(
    algorithm: Annotated[str, typer.Argument(help="Algorithm name.")],
    value: Annotated[str | None, typer.Argument(help="Algorithm input.")] = None,
) -> None:
    """List every recorded step: line, open frames, stack depth, latest log line."""
    algo = _lookup(algorithm)
    controller, summary = _record(algo, value)

    table = Table(title=f"{algo.title}({summary.argument}) timeline")
    table.add_column("Step", justify="right")
    table.add_column("Line", justify="right")
    table.add_column("Frames", justify="right")
    table.add_column("Stack", justify="right")
    table.add_column("Last log")
    for i, snap in enumerate(controller.history):
        last = snap.logs[-1].message if snap.logs else ""
        table.add_row(str(i), str(snap.active_line), str(len(snap.frames)), str(len(snap.stack)), last)
    console.print(table)
    _print_summary(summary)


@app.command()  # type: ignore[misc]
def show(
    algorithm: Annotated[str, typer.Argument(help="Algorithm name.")],
    value: Annotated[str | None, typer.Argument(help="Algorithm input.")] = None,
    step: Annotated[int, typer.Option("--step", "-k", help="0-based step to display.")] = 0,
) -> None:
    """Record a run instantly, then seek to `--step` and render that state."""
    algo = _lookup(algorithm)
    controller, _ = _record(algo, value)

    found = controller.seek(step)
    if found.is_err():
        console.print(f"[bold red]❌ Seek Error:[/bold red] {found.unwrap_err()}")
        raise typer.Exit(code=1)
    console.print(render_view(algo, controller.view()))


if __name__ == "__main__":
    app()

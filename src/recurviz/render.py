"""
Terminal renderers for recorded snapshots.

Every function here is a pure mapping from a :class:`Snapshot` (or a
:class:`PlaybackView`) to a Rich renderable; none of them touch the live
model. The CLI composes them into a single dashboard, both for live runs
(inside ``rich.live.Live``) and for seeks into the history.
"""

from __future__ import annotations

from typing import Any

from rich.columns import Columns
from rich.console import Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from recurviz.algorithms.base import RecursiveAlgorithm
from recurviz.core.contracts.frame import Frame, FrameStatus
from recurviz.core.contracts.snapshot import Snapshot
from recurviz.core.contracts.view import PlaybackView

STATUS_STYLES: dict[FrameStatus, str] = {
    FrameStatus.ACTIVE: "bold cyan",
    FrameStatus.PENDING: "yellow",
    FrameStatus.RETURNING: "bold blue",
    FrameStatus.COMPLETED: "green",
}

LOG_STYLES: dict[str, str] = {
    "info": "white",
    "success": "green",
    "error": "bold red",
    "system": "dim",
}

# Always show at least this many memory slots, even for shallow runs.
_MIN_MEMORY_ROWS = 8


def frame_label(frame: Frame) -> Text:
    """One-line label for a tree node: name, args, note, return value, depth."""
    label = Text()
    label.append(f"{frame.name}({frame.args})", style=STATUS_STYLES[frame.status])
    label.append(f" [{frame.status.value}]", style="dim")
    if frame.note:
        label.append(f"  {frame.note}", style="italic blue")
    if frame.return_value is not None:
        label.append(f"  Ret: {frame.return_value}", style="bold green")
    label.append(f"  d={frame.depth}", style="dim")
    return label


def render_tree(snap: Snapshot) -> Tree | Text:
    """Render the call tree from the root; children in call order."""
    root = snap.root()
    if root is None:
        return Text("Ready. Run an algorithm to build the call tree.", style="dim")

    by_id = {f.id: f for f in snap.frames}

    def _attach(node: Tree, frame: Frame) -> None:
        for child_id in frame.children:
            child = by_id[child_id]
            _attach(node.add(frame_label(child)), child)

    tree = Tree(frame_label(root), guide_style="grey50")
    _attach(tree, root)
    return tree


def render_stack(snap: Snapshot) -> Table:
    """Call stack, innermost call on top."""
    table = Table(title="Call Stack", expand=True, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Call")
    for i, entry in reversed(list(enumerate(snap.stack))):
        style = "bold cyan" if i == len(snap.stack) - 1 else ""
        table.add_row(str(i), Text(entry.signature(), style=style))
    if not snap.stack:
        table.add_row("-", Text("(empty)", style="dim"))
    return table


def render_memory(snap: Snapshot, rows: int | None = None) -> Table:
    """Stack memory slots, up to the deepest occupied slot (or ``rows``)."""
    occupied = snap.occupied_indices()
    if rows is None:
        rows = max(_MIN_MEMORY_ROWS, max(occupied, default=-1) + 2)
    table = Table(title="Stack Memory", expand=True)
    table.add_column("Address", style="dim")
    table.add_column("Depth", justify="right")
    table.add_column("Value")
    for slot in snap.memory[:rows]:
        if slot.is_occupied:
            table.add_row(slot.address, str(slot.depth), Text(slot.value, style="bold magenta"))
        else:
            table.add_row(slot.address, "-", Text("free", style="dim"))
    return table


def render_logs(snap: Snapshot, tail: int = 8) -> Table:
    """Most recent ``tail`` log entries."""
    table = Table(title="Log", expand=True, show_header=False)
    table.add_column("Time", style="dim", no_wrap=True)
    table.add_column("Message")
    for entry in snap.logs[-tail:]:
        table.add_row(entry.timestamp, Text(entry.message, style=LOG_STYLES[entry.type]))
    return table


def render_source(algo: RecursiveAlgorithm[Any, Any], active_line: int = -1) -> Syntax:
    """Source listing with ``active_line`` (0-based) highlighted."""
    highlight = {active_line + 1} if active_line >= 0 else set()
    return Syntax(algo.source, "cpp", line_numbers=True, highlight_lines=highlight)


def render_view(algo: RecursiveAlgorithm[Any, Any], view: PlaybackView) -> Group:
    """Full dashboard: tree, source, stack, memory, log and the step counter."""
    snap = view.snapshot
    shown = view.current_step + 1 if view.total_steps else 0
    status = "running" if view.in_progress else "idle"
    header = Text.assemble(
        (f"{algo.title}", "bold"),
        f"  step {shown}/{view.total_steps}",
        f"  speed {'MAX' if view.instant else f'{view.speed:g}x'}",
        (f"  [{status}]", "dim"),
    )
    return Group(
        header,
        Panel(render_tree(snap), title="Call Tree", border_style="cyan"),
        Columns(
            [
                Panel(render_source(algo, snap.active_line), title="Source"),
                render_stack(snap),
                render_memory(snap),
            ],
            expand=True,
        ),
        render_logs(snap),
    )


__all__ = [
    "frame_label",
    "render_tree",
    "render_stack",
    "render_memory",
    "render_logs",
    "render_source",
    "render_view",
]

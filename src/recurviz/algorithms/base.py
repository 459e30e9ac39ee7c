"""
Algorithm descriptors.

Every built-in algorithm follows the same instrumented skeleton
(push stack → create frame → base case → recurse → combine → pop). The
skeleton lives once in :mod:`recurviz.algorithms.runner`; a descriptor only
supplies the algorithm-specific pieces:

- the canonical source listing and the line indices each step highlights,
- input coercion and display formatting,
- the base-case predicate, the child-call enumerator and the combine step,
- the notes and log lines that narrate each step.

Adding an algorithm means writing one descriptor and registering it in
:mod:`recurviz.algorithms.registry`; the runner and the playback controller
do not change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar, Generic, Literal, TypeVar

from recurviz.core.contracts.log import LogType
from recurviz.core.contracts.view import AlgorithmType

A = TypeVar("A")
V = TypeVar("V")

LogLine = tuple[str, LogType]


@dataclass(frozen=True, slots=True)
class SourceLines:
    """Line indices (0-based) into an algorithm's source listing.

    Attributes
    ----------
    recurse:
        Highlighted when the frame goes ``pending`` on its first child call.
    combine:
        Highlighted for the combine, return and completion steps.
    entry:
        Highlighted for the stack-push and frame-creation steps.
    resume:
        Highlighted by the transitional step between two child calls;
        only meaningful for algorithms with more than one child.
    """

    recurse: int
    combine: int
    entry: int = 0
    resume: int | None = None


@dataclass(frozen=True, slots=True)
class BaseCase(Generic[V]):
    """A base case that fired: its value, source line, frame note and log line."""

    value: V
    line: int
    note: str = "Base Case"
    log: str | None = None


class RecursiveAlgorithm(ABC, Generic[A, V]):
    """Descriptor for one instrumented recursive algorithm.

    ``A`` is the argument type of a single call, ``V`` its return type.
    """

    kind: ClassVar[AlgorithmType]
    title: ClassVar[str]
    frame_name: ClassVar[str]
    function_name: ClassVar[str]
    source: ClassVar[str]
    lines: ClassVar[SourceLines]

    input_kind: ClassVar[Literal["int", "str"]] = "int"
    default_input: ClassVar[int | str]
    # Largest accepted input; the maximum length for string inputs.
    max_input: ClassVar[int | None] = None

    # Note shown while the frame waits between two child calls.
    resume_note: ClassVar[str | None] = None

    # ----------------------------- Input ------------------------------------

    @abstractmethod
    def coerce_input(self, raw: object) -> A:
        """Turn raw user input into a safe argument (never raises)."""

    def describe_input(self, arg: A) -> str:
        """Argument as shown in the run banner, e.g. ``5`` or ``"level"``."""
        return str(arg)

    # ----------------------------- Display ----------------------------------

    @abstractmethod
    def frame_args(self, arg: A) -> str:
        """Argument rendering for the tree node (e.g. ``n=3``)."""

    @abstractmethod
    def stack_args(self, arg: A) -> dict[str, int | str]:
        """Parameter mapping for the call-stack entry."""

    def render(self, value: V) -> str:
        """Render a return value for display; booleans become ``true``/``false``."""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    # ----------------------------- Recursion --------------------------------

    @abstractmethod
    def base_case(self, arg: A) -> BaseCase[V] | None:
        """Return the fired base case, or ``None`` to recurse."""

    @abstractmethod
    def subproblems(self, arg: A) -> Sequence[A]:
        """Child-call arguments, in the order the calls are issued."""

    @abstractmethod
    def combine(self, arg: A, results: Sequence[V]) -> V:
        """Compute this call's value from its children's results."""

    @abstractmethod
    def combine_note(self, arg: A, results: Sequence[V]) -> str:
        """Frame note shown while combining (e.g. ``5 * 24``)."""

    def pending_note(self, arg: A) -> str | None:
        """Frame note shown while the first child call is outstanding."""
        return None

    def combine_log(self, arg: A, results: Sequence[V], value: V) -> LogLine | None:
        """Log line emitted with the combine step, if any."""
        return None

    def return_log(self, arg: A, value: V) -> LogLine | None:
        """Log line emitted with the returning step, if any."""
        return None

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        return f"<{type(self).__name__} {self.kind.value}>"


__all__ = ["RecursiveAlgorithm", "BaseCase", "SourceLines", "LogLine"]

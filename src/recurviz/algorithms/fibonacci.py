"""
Fibonacci: ``fib(n) = fib(n-1) + fib(n-2)`` with ``fib(0) = 0``, ``fib(1) = 1``.

The only built-in algorithm with two child calls. The left subtree is fully
evaluated before the right one is issued, and the frame shows a ``Wait...``
step in between so the timeline marks the switch from left to right.
"""

from __future__ import annotations

from collections.abc import Sequence

from recurviz.algorithms.base import BaseCase, LogLine, RecursiveAlgorithm, SourceLines
from recurviz.algorithms.inputs import coerce_int
from recurviz.core.contracts.view import AlgorithmType

SOURCE = """\
int fibonacci(int n) {
    // Base cases
    if (n == 0) return 0;
    if (n == 1) return 1;

    // Branching
    int left = fibonacci(n - 1);
    int right = fibonacci(n - 2);

    return left + right;
}"""


class Fibonacci(RecursiveAlgorithm[int, int]):
    kind = AlgorithmType.FIBONACCI
    title = "Fibonacci"
    frame_name = "fib"
    function_name = "fib"
    source = SOURCE
    lines = SourceLines(recurse=6, resume=7, combine=9)
    resume_note = "Wait..."

    default_input = 4
    max_input = 7

    def coerce_input(self, raw: object) -> int:
        return coerce_int(raw, default=int(self.default_input), high=7)

    def frame_args(self, arg: int) -> str:
        return f"n={arg}"

    def stack_args(self, arg: int) -> dict[str, int | str]:
        return {"n": arg}

    def base_case(self, arg: int) -> BaseCase[int] | None:
        if arg <= 1:
            return BaseCase(
                value=arg, line=2 + arg, log=f"Base case: n={arg} -> return {arg}"
            )
        return None

    def subproblems(self, arg: int) -> Sequence[int]:
        return [arg - 1, arg - 2]

    def combine(self, arg: int, results: Sequence[int]) -> int:
        left, right = results
        return left + right

    def combine_note(self, arg: int, results: Sequence[int]) -> str:
        left, right = results
        return f"{left} + {right}"

    def combine_log(self, arg: int, results: Sequence[int], value: int) -> LogLine | None:
        left, right = results
        return f"Combine: {left} + {right} = {value}", "success"

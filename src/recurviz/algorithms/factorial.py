"""Factorial: ``n! = n * (n-1)!`` with ``n <= 1`` as the base case."""

from __future__ import annotations

from collections.abc import Sequence

from recurviz.algorithms.base import BaseCase, LogLine, RecursiveAlgorithm, SourceLines
from recurviz.algorithms.inputs import coerce_int
from recurviz.core.contracts.view import AlgorithmType

SOURCE = """\
int factorial(int n) {
    // Base case
    if (n <= 1) return 1;

    // Recursive step
    int prev = factorial(n - 1);
    return n * prev;
}"""


class Factorial(RecursiveAlgorithm[int, int]):
    kind = AlgorithmType.FACTORIAL
    title = "Factorial"
    frame_name = "fact"
    function_name = "factorial"
    source = SOURCE
    lines = SourceLines(recurse=5, combine=6)

    default_input = 5
    max_input = 12

    def coerce_input(self, raw: object) -> int:
        return coerce_int(raw, default=int(self.default_input), high=12)

    def frame_args(self, arg: int) -> str:
        return f"n={arg}"

    def stack_args(self, arg: int) -> dict[str, int | str]:
        return {"n": arg}

    def base_case(self, arg: int) -> BaseCase[int] | None:
        if arg <= 1:
            return BaseCase(value=1, line=2, log=f"Base case: n={arg} -> return 1")
        return None

    def subproblems(self, arg: int) -> Sequence[int]:
        return [arg - 1]

    def combine(self, arg: int, results: Sequence[int]) -> int:
        return arg * results[0]

    def combine_note(self, arg: int, results: Sequence[int]) -> str:
        return f"{arg} * {results[0]}"

    def combine_log(self, arg: int, results: Sequence[int], value: int) -> LogLine | None:
        return f"Compute: {arg} * {results[0]}", "system"

    def return_log(self, arg: int, value: int) -> LogLine | None:
        return f"Return: {value}", "success"

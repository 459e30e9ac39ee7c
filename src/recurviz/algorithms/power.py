"""Power with a fixed base: ``2^n = 2 * 2^(n-1)``, ``2^0 = 1``."""

from __future__ import annotations

from collections.abc import Sequence

from recurviz.algorithms.base import BaseCase, LogLine, RecursiveAlgorithm, SourceLines
from recurviz.algorithms.inputs import coerce_int
from recurviz.core.contracts.view import AlgorithmType

BASE = 2

SOURCE = """\
int power(int x, int n) {
    // Base case
    if (n == 0) return 1;

    // Recursive step
    int prev = power(x, n - 1);
    return x * prev;
}"""


class Power(RecursiveAlgorithm[int, int]):
    kind = AlgorithmType.POWER
    title = "Power"
    frame_name = "pow"
    function_name = "pow"
    source = SOURCE
    lines = SourceLines(recurse=5, combine=6)

    default_input = 5
    max_input = 8

    def coerce_input(self, raw: object) -> int:
        return coerce_int(raw, default=int(self.default_input), high=8)

    def describe_input(self, arg: int) -> str:
        return f"{BASE}, {arg}"

    def frame_args(self, arg: int) -> str:
        return f"x={BASE},n={arg}"

    def stack_args(self, arg: int) -> dict[str, int | str]:
        return {"x": BASE, "n": arg}

    def base_case(self, arg: int) -> BaseCase[int] | None:
        if arg == 0:
            return BaseCase(value=1, line=2, log="Base case: n=0 -> return 1")
        return None

    def subproblems(self, arg: int) -> Sequence[int]:
        return [arg - 1]

    def combine(self, arg: int, results: Sequence[int]) -> int:
        return BASE * results[0]

    def combine_note(self, arg: int, results: Sequence[int]) -> str:
        return f"{BASE} * {results[0]}"

    def combine_log(self, arg: int, results: Sequence[int], value: int) -> LogLine | None:
        return f"Compute: {BASE} * {results[0]}", "system"

    def return_log(self, arg: int, value: int) -> LogLine | None:
        return f"Return: {value}", "success"

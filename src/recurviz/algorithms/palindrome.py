"""Palindrome check by peeling the outer characters off one pair at a time."""

from __future__ import annotations

from collections.abc import Sequence

from recurviz.algorithms.base import BaseCase, LogLine, RecursiveAlgorithm, SourceLines
from recurviz.algorithms.inputs import coerce_text
from recurviz.core.contracts.view import AlgorithmType

SOURCE = """\
bool isPalindrome(string s) {
    // Base case
    if (s.length() <= 1) return true;

    // Compare first and last characters
    if (s[0] != s[s.length()-1])
        return false;

    // Check the inner substring
    return isPalindrome(s.substr(1, s.length()-2));
}"""


class Palindrome(RecursiveAlgorithm[str, bool]):
    kind = AlgorithmType.PALINDROME
    title = "Palindrome"
    frame_name = "isPal"
    function_name = "isPal"
    source = SOURCE
    lines = SourceLines(recurse=9, combine=9)

    input_kind = "str"
    default_input = "racecar"
    # Maximum length: 24 characters recurse at most 13 calls deep.
    max_input = 24

    def coerce_input(self, raw: object) -> str:
        return coerce_text(raw, default=str(self.default_input), max_len=self.max_input)

    def describe_input(self, arg: str) -> str:
        return f'"{arg}"'

    def frame_args(self, arg: str) -> str:
        return f'"{arg}"'

    def stack_args(self, arg: str) -> dict[str, int | str]:
        return {"s": f'"{arg}"'}

    def base_case(self, arg: str) -> BaseCase[bool] | None:
        if len(arg) <= 1:
            return BaseCase(value=True, line=2, log=f'Base case: "{arg}" -> return true')
        if arg[0] != arg[-1]:
            return BaseCase(
                value=False,
                line=5,
                note="Mismatch",
                log=f"Mismatch: '{arg[0]}' != '{arg[-1]}' -> return false",
            )
        return None

    def subproblems(self, arg: str) -> Sequence[str]:
        return [arg[1:-1]]

    def pending_note(self, arg: str) -> str | None:
        return "Check inner..."

    def combine(self, arg: str, results: Sequence[bool]) -> bool:
        return results[0]

    def combine_note(self, arg: str, results: Sequence[bool]) -> str:
        return f"Res: {self.render(results[0])}"

    def return_log(self, arg: str, value: bool) -> LogLine | None:
        return f"Return: {self.render(value)}", "success"

"""
Input coercion for the built-in algorithms.

Inputs are never rejected: malformed numbers fall back to the algorithm's
default, out-of-range numbers are capped to the safe recursion bound and
over-long strings are truncated.

>>> coerce_int("42", default=5, high=12)
12
>>> coerce_int("abc", default=5, high=12)
5
>>> coerce_int(" -3 ", default=5, high=12)
0
"""

from __future__ import annotations

import re

from recurviz.core.result import Result, err, ok

_INT_RE = re.compile(r"^[+-]?\d+$")


def parse_int(raw: object) -> Result[int, str]:
    """Parse ``raw`` as an integer without raising.

    Accepts real ``int`` values (but not ``bool``) and strings holding an
    optionally signed run of digits, surrounding whitespace allowed.
    """
    if isinstance(raw, bool):
        return err(f"not an integer: {raw!r}")
    if isinstance(raw, int):
        return ok(raw)
    if isinstance(raw, str) and _INT_RE.match(raw.strip()):
        return ok(int(raw.strip()))
    return err(f"not an integer: {raw!r}")


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def coerce_int(raw: object, *, default: int, high: int, low: int = 0) -> int:
    """Parse ``raw``, substitute ``default`` on failure, cap into ``[low, high]``."""
    return parse_int(raw).map(lambda n: clamp(n, low, high)).get_or(default)


def coerce_text(raw: object, *, default: str, max_len: int | None = None) -> str:
    """Return ``raw`` as text, or ``default`` when missing or empty.

    Text longer than ``max_len`` is cut to its first ``max_len`` characters.
    """
    if raw is None:
        return default
    text = str(raw)[:max_len]
    return text if text else default


__all__ = ["parse_int", "clamp", "coerce_int", "coerce_text"]

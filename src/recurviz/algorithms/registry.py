# -----------------------------------------------------------------------------
# In-process registry of the built-in algorithm descriptors.
#
# The registry is the single place that maps an AlgorithmType (or a
# case-insensitive name such as "fib" or "factorial") to the descriptor that
# the shared runner executes. Adding an algorithm means writing a descriptor
# and adding one entry here.
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Any

from recurviz.algorithms.base import RecursiveAlgorithm
from recurviz.algorithms.factorial import Factorial
from recurviz.algorithms.fibonacci import Fibonacci
from recurviz.algorithms.palindrome import Palindrome
from recurviz.algorithms.power import Power
from recurviz.core.contracts.view import AlgorithmType

ALGORITHM_REGISTRY: dict[AlgorithmType, RecursiveAlgorithm[Any, Any]] = {
    AlgorithmType.FACTORIAL: Factorial(),
    AlgorithmType.FIBONACCI: Fibonacci(),
    AlgorithmType.POWER: Power(),
    AlgorithmType.PALINDROME: Palindrome(),
}

# Short names accepted by the CLI and API in addition to the enum values.
_ALIASES: dict[str, AlgorithmType] = {
    "fact": AlgorithmType.FACTORIAL,
    "fib": AlgorithmType.FIBONACCI,
    "pow": AlgorithmType.POWER,
    "pal": AlgorithmType.PALINDROME,
    "ispal": AlgorithmType.PALINDROME,
}


def resolve(name: AlgorithmType | str) -> AlgorithmType:
    """Resolve an enum member or a case-insensitive name / alias.

    Raises
    ------
    KeyError
        If ``name`` does not match any registered algorithm.
    """
    if isinstance(name, AlgorithmType):
        return name
    key = name.strip().lower()
    for kind in ALGORITHM_REGISTRY:
        if kind.value.lower() == key:
            return kind
    if key in _ALIASES:
        return _ALIASES[key]
    known = ", ".join(k.value.lower() for k in ALGORITHM_REGISTRY)
    raise KeyError(f"Unknown algorithm '{name}'. Known algorithms: {known}")


def get_algorithm(name: AlgorithmType | str) -> RecursiveAlgorithm[Any, Any]:
    """Return the descriptor registered for ``name``."""
    return ALGORITHM_REGISTRY[resolve(name)]


def all_algorithms() -> tuple[RecursiveAlgorithm[Any, Any], ...]:
    """Return every registered descriptor in declaration order."""
    return tuple(ALGORITHM_REGISTRY.values())


__all__ = ["ALGORITHM_REGISTRY", "resolve", "get_algorithm", "all_algorithms"]

from __future__ import annotations

from .base import BaseCase, RecursiveAlgorithm, SourceLines
from .registry import ALGORITHM_REGISTRY, all_algorithms, get_algorithm, resolve
from .runner import Recorder, run_algorithm, run_call

__all__ = [
    "RecursiveAlgorithm",
    "BaseCase",
    "SourceLines",
    "ALGORITHM_REGISTRY",
    "get_algorithm",
    "all_algorithms",
    "resolve",
    "Recorder",
    "run_algorithm",
    "run_call",
]

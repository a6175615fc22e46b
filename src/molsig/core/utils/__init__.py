"""Utility helpers for the core services."""

from .benchmarking import PerformanceStats, TimingStats, timer
from .permutations import distinct_permutations, next_permutation

__all__ = [
    "PerformanceStats",
    "TimingStats",
    "timer",
    "distinct_permutations",
    "next_permutation",
]

# src/molsig/core/utils/benchmarking.py

import time
from typing import Dict, Optional, List
from contextlib import contextmanager
from dataclasses import dataclass, field
from statistics import mean, median


@dataclass
class TimingStats:
    """Statistics for a timed search step."""

    name: str
    total_time: float = 0.0
    count: int = 0
    times: List[float] = field(default_factory=list)
    max_time: float = 0.0

    def add_timing(self, elapsed: float) -> None:
        """Add a timing measurement.

        Args:
            elapsed: Time taken in seconds
        """
        self.total_time += elapsed
        self.count += 1
        self.times.append(elapsed)
        self.max_time = max(self.max_time, elapsed)

    @property
    def avg_time(self) -> float:
        return mean(self.times) if self.times else 0.0

    @property
    def median_time(self) -> float:
        return median(self.times) if self.times else 0.0

    def __str__(self) -> str:
        if not self.times:
            return f"{self.name}: No timing data"

        stats = [
            f"Total: {self.total_time:.3f}s",
            f"Count: {self.count}",
            f"Avg: {self.avg_time * 1000:.3f}ms",
            f"Median: {self.median_time * 1000:.3f}ms",
            f"Max: {self.max_time * 1000:.3f}ms",
        ]
        return f"{self.name}: " + ", ".join(stats)


class PerformanceStats:
    """Collect and report search counters and timings."""

    def __init__(self) -> None:
        self.stats: Dict[str, TimingStats] = {}
        self.counters: Dict[str, int] = {}

    def get_stats(self, name: str) -> TimingStats:
        """Get or create stats for an operation."""
        if name not in self.stats:
            self.stats[name] = TimingStats(name=name)
        return self.stats[name]

    def add_timing(self, name: str, elapsed: float) -> None:
        self.get_stats(name).add_timing(elapsed)

    def increment(self, name: str, amount: int = 1) -> None:
        """Add amount to the named counter."""
        self.counters[name] = self.counters.get(name, 0) + amount

    def count(self, name: str) -> int:
        return self.counters.get(name, 0)

    def reset(self) -> None:
        self.stats.clear()
        self.counters.clear()

    def report(self) -> str:
        """Generate a performance report."""
        if not self.stats and not self.counters:
            return "No performance data collected"

        lines = [f"{name}: {self.counters[name]}" for name in sorted(self.counters)]
        total_time = sum(s.total_time for s in self.stats.values())

        for name in sorted(self.stats.keys()):
            stats = self.stats[name]
            if stats.total_time > 0:
                pct = (stats.total_time / total_time) * 100 if total_time > 0 else 0
                lines.append(f"{stats} ({pct:.1f}%)")

        return "\n".join(lines)


@contextmanager
def timer(name: str, stats: Optional[PerformanceStats] = None):
    """Context manager for timing code blocks with optional stats collection.

    Args:
        name: Name of the operation being timed
        stats: Optional PerformanceStats object to collect metrics
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if stats is not None:
            stats.add_timing(name, elapsed)

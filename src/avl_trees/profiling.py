"""Batch timing utilities for tree comparisons."""

import time
import gc
from contextlib import contextmanager
from typing import Dict, Iterator, List
from dataclasses import dataclass, field
from collections import defaultdict

import numpy as np


@dataclass
class BatchMetrics:
    """Timings (in nanoseconds) collected for one tagged batch."""
    samples: List[int] = field(default_factory=list)

    def add_measurement(self, elapsed_ns: int) -> None:
        self.samples.append(elapsed_ns)

    @property
    def run_count(self) -> int:
        return len(self.samples)

    @property
    def total_ns(self) -> int:
        return sum(self.samples)

    @property
    def mean_ns(self) -> float:
        return float(np.mean(self.samples)) if self.samples else 0.0

    @property
    def median_ns(self) -> float:
        return float(np.median(self.samples)) if self.samples else 0.0

    @property
    def var_ns(self) -> float:
        return float(np.var(self.samples)) if self.samples else 0.0

    def __str__(self) -> str:
        return (f"Runs: {self.run_count}, "
                f"Total: {self.total_ns} ns, "
                f"Mean: {self.mean_ns:.1f} ns, "
                f"Median: {self.median_ns:.1f} ns, "
                f"Var: {self.var_ns:.1f} ns²")


class PerformanceTracker:
    """Central collector for batch timings, keyed by tag."""

    _instance = None

    @classmethod
    def get_instance(cls) -> 'PerformanceTracker':
        """Singleton accessor."""
        if cls._instance is None:
            cls._instance = PerformanceTracker()
        return cls._instance

    def __init__(self):
        self.metrics: Dict[str, BatchMetrics] = defaultdict(BatchMetrics)
        self.enabled = True

    def add_measurement(self, tag: str, elapsed_ns: int) -> None:
        if self.enabled:
            self.metrics[tag].add_measurement(elapsed_ns)

    def reset(self) -> None:
        self.metrics.clear()

    def report(self) -> str:
        """Generate a table of all tags in insertion order."""
        if not self.metrics:
            return "No performance data collected."

        lines = ["Batch timings:"]
        lines.append("-" * 80)
        lines.append(f"{'Batch':<32} {'Runs':>6} {'Mean (ns)':>14} {'Median (ns)':>14} {'Var (ns²)':>10}")
        lines.append("-" * 80)
        for tag, metrics in self.metrics.items():
            lines.append(f"{tag:<32} {metrics.run_count:>6} {metrics.mean_ns:>14.1f} "
                         f"{metrics.median_ns:>14.1f} {metrics.var_ns:>10.3g}")
        return "\n".join(lines)


class Measurement:
    """Result handle of measure(); elapsed_ns is set when the block exits."""
    __slots__ = ("tag", "elapsed_ns")

    def __init__(self, tag: str):
        self.tag = tag
        self.elapsed_ns = 0


@contextmanager
def measure(tag: str, record: bool = True) -> Iterator[Measurement]:
    """
    Time the enclosed block with the monotonic perf_counter_ns clock.

    Garbage collection is disabled for the duration of the block. If record
    is True the timing is also added to the PerformanceTracker under tag.
    """
    result = Measurement(tag)
    gc.collect()
    gc.disable()
    try:
        t0 = time.perf_counter_ns()
        yield result
        result.elapsed_ns = time.perf_counter_ns() - t0
    finally:
        gc.enable()
    if record:
        PerformanceTracker.get_instance().add_measurement(tag, result.elapsed_ns)

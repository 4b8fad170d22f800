from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class BenchmarkReport:
    first_run: float
    iterations: int
    best: Optional[float]


def bench_once(func: Callable[[], object]) -> float:
    """Measure the execution time of a single call, in seconds."""
    started = time.perf_counter()
    func()
    return time.perf_counter() - started


def bench_times(iterations: int, func: Callable[[], object]) -> Optional[float]:
    """Run func ``iterations`` times and return the fastest measurement.

    Keeping only the minimum filters out most scheduler noise. Returns None
    when no measurement was taken.
    """
    best: Optional[float] = None
    for _ in range(max(iterations, 0)):
        elapsed = bench_once(func)
        if best is None or elapsed < best:
            best = elapsed
    return best


def calc_iterations(one_measurement_takes: float, desired_time: float) -> int:
    """Estimate how many runs of bench_once fit into desired_time."""
    if one_measurement_takes <= 0:
        raise ValueError(
            f"one_measurement_takes must be positive, got {one_measurement_takes}"
        )

    div = 1
    while desired_time / div > one_measurement_takes:
        div *= 10
    # Measured runs take about twice as long as the first estimate.
    return div // 2


def benchmark(func: Callable[[], object], desired_time: float) -> BenchmarkReport:
    first_run = bench_once(func)
    # Coarse clocks can report a zero-length run.
    resolution = time.get_clock_info("perf_counter").resolution
    iterations = calc_iterations(max(first_run, resolution), desired_time)
    return BenchmarkReport(
        first_run=first_run,
        iterations=iterations,
        best=bench_times(iterations, func),
    )

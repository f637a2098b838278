"""Composite Simpson and trapezoidal quadrature, serial and threaded."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple

Function = Callable[[float], float]
Rule = Callable[[Function, float, float, int], float]
ParallelRule = Callable[[Function, float, float, int, int], float]

DEFAULT_THREAD_COUNTS = (4, 8, 16, 32, 64)

_PREFIX = "\t\t\t\t\t"
_RULE = "+------------------+------------------+------------------+------------------+"


class BenchmarkRow(NamedTuple):
    """Results and timings of a serial and a parallel run."""

    threads: int
    serial_result: float
    parallel_result: float
    serial_time: float
    parallel_time: float


def integrand(x: float) -> float:
    """The function integrated by the benchmarks: 2 / (x^2 + 4)."""
    return 2 / (x ** 2 + 4)


def _check_intervals(n: int) -> None:
    if n < 1:
        raise ValueError(f"number of intervals must be positive, got {n}")


def _samples(func: Function, a: float, b: float, n: int) -> tuple[float, list[float]]:
    _check_intervals(n)
    h = (b - a) / n
    return h, [func(a + i * h) for i in range(n + 1)]


def _samples_parallel(
    func: Function, a: float, b: float, n: int, num_threads: int
) -> tuple[float, list[float]]:
    _check_intervals(n)
    if num_threads < 1:
        raise ValueError(f"number of threads must be positive, got {num_threads}")
    h = (b - a) / n
    xs = [a + i * h for i in range(n + 1)]
    size = max(1, -(-len(xs) // num_threads))
    chunks = [xs[start:start + size] for start in range(0, len(xs), size)]
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        parts = pool.map(lambda chunk: [func(x) for x in chunk], chunks)
        return h, [value for part in parts for value in part]


def _simpson_sum(h: float, ys: Sequence[float]) -> float:
    n = len(ys) - 1
    odd = sum(ys[1:n:2])
    even = sum(ys[2:n - 1:2])
    return h / 3 * (ys[0] + 4 * odd + 2 * even + ys[n])


def simpson(func: Function, a: float, b: float, n: int) -> float:
    """Composite Simpson's 1/3 rule over ``n`` intervals."""
    h, ys = _samples(func, a, b, n)
    return _simpson_sum(h, ys)


def parallel_simpson(func: Function, a: float, b: float, n: int, num_threads: int) -> float:
    """Simpson's 1/3 rule with function evaluation spread over threads."""
    h, ys = _samples_parallel(func, a, b, n, num_threads)
    return _simpson_sum(h, ys)


def trapezoidal(func: Function, a: float, b: float, n: int) -> float:
    """Composite trapezoidal rule over ``n`` intervals."""
    h, ys = _samples(func, a, b, n)
    return h / 2 * (ys[0] + 2 * sum(ys[1:n]) + ys[n])


def parallel_trapezoidal(
    func: Function, a: float, b: float, n: int, num_threads: int
) -> float:
    """Threaded counterpart of the trapezoidal benchmark.

    Interior points are weighted 4 (odd) and 2 (even) with factor h/3, so the
    value agrees with Simpson's rule rather than the serial trapezoidal rule.
    """
    h, ys = _samples_parallel(func, a, b, n, num_threads)
    interior = sum((2 if i % 2 == 0 else 4) * y for i, y in enumerate(ys[1:n], start=1))
    return h / 3 * (ys[0] + interior + ys[n])


def format_results_table(
    serial_result: float,
    parallel_result: float,
    serial_time: float,
    parallel_time: float,
    num_threads: int,
) -> str:
    """Render one benchmark result as a console table."""
    lines = [
        _RULE,
        "|   Threads | Serial Result | Parallel Result | Serial Time | Parallel Time |",
        _RULE,
        f"|   {num_threads:2d}     |  {serial_result:12f}        |  {parallel_result:13f}"
        f"          | {serial_time:12.6f} (s)  |  {parallel_time:13.6f} (s)   |",
        _RULE,
    ]
    return "".join(f"{_PREFIX}{line}\n" for line in lines)


def benchmark(
    serial: Rule,
    parallel: ParallelRule,
    func: Function,
    a: float,
    b: float,
    n: int,
    thread_counts: Iterable[int] = DEFAULT_THREAD_COUNTS,
) -> list[BenchmarkRow]:
    """Time a serial rule against its parallel counterpart per thread count."""
    rows = []
    for threads in thread_counts:
        t1 = time.perf_counter()
        serial_result = serial(func, a, b, n)
        t2 = time.perf_counter()
        parallel_result = parallel(func, a, b, n, threads)
        t3 = time.perf_counter()
        rows.append(BenchmarkRow(threads, serial_result, parallel_result, t2 - t1, t3 - t2))
    return rows
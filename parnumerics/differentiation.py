"""Finite-difference derivatives of sampled functions, serial and threaded."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import islice, pairwise
from os import PathLike
from pathlib import Path
from typing import NamedTuple

Function = Callable[[float], float]

MIN_POINTS = 2
MAX_POINTS = 100_000
DEFAULT_THREAD_COUNTS = (1, 2, 4, 6, 8, 10)

_TABLE_HEADER = "|   x   |   f(x)   | df(x)/dx |\n|-------|----------|----------|\n"
_FILE_HEADER = "x     | f(x)     | f'(x)\n__________________________\n"


class Timing(NamedTuple):
    """Wall-clock time of one run with a given number of threads."""

    threads: int
    seconds: float


def example_function(x: float) -> float:
    """The function differentiated by the benchmarks: x squared."""
    return x * x


def _spacing(xs: Sequence[float]) -> float:
    if len(xs) < MIN_POINTS:
        raise ValueError(f"at least {MIN_POINTS} points are needed, got {len(xs)}")
    h = xs[1] - xs[0]
    if h == 0:
        raise ValueError("the first two points must differ")
    return h


def _check_threads(num_threads: int) -> None:
    if num_threads < 1:
        raise ValueError(f"number of threads must be positive, got {num_threads}")


def _evaluate_parallel(xs: Sequence[float], func: Function, num_threads: int) -> list[float]:
    _check_threads(num_threads)
    size = max(1, -(-len(xs) // num_threads))
    chunks = [xs[start:start + size] for start in range(0, len(xs), size)]
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        parts = pool.map(lambda chunk: [func(x) for x in chunk], chunks)
        return [value for part in parts for value in part]


def _differences(ys: Iterable[float], h: float) -> list[float]:
    return [(right - left) / h for left, right in pairwise(ys)]


def _forward(ys: Sequence[float], h: float) -> list[float]:
    diffs = _differences(ys, h)
    return diffs + [diffs[-1]]


def _backward(ys: Sequence[float], h: float) -> list[float]:
    diffs = _differences(ys, h)
    return [diffs[0]] + diffs


def forward_difference(xs: Sequence[float], func: Function) -> list[float]:
    """Forward differences; the last point reuses the final backward step."""
    h = _spacing(xs)
    return _forward([func(x) for x in xs], h)


def backward_difference(xs: Sequence[float], func: Function) -> list[float]:
    """Backward differences; the first point reuses the first forward step."""
    h = _spacing(xs)
    return _backward([func(x) for x in xs], h)


def parallel_forward_difference(
    xs: Sequence[float], func: Function, num_threads: int
) -> list[float]:
    """Forward differences with function evaluation spread over threads."""
    h = _spacing(xs)
    return _forward(_evaluate_parallel(xs, func, num_threads), h)


def parallel_backward_difference(
    xs: Sequence[float], func: Function, num_threads: int
) -> list[float]:
    """Backward differences with function evaluation spread over threads."""
    h = _spacing(xs)
    return _backward(_evaluate_parallel(xs, func, num_threads), h)


def format_table(xs: Sequence[float], func: Function, derivatives: Sequence[float]) -> str:
    """Render points, function values and derivatives as a console table."""
    rows = "".join(
        f"| {x:.3f} | {func(x):.6f} | {d:.5f} |\n" for x, d in zip(xs, derivatives)
    )
    return _TABLE_HEADER + rows


def write_results(
    path: str | PathLike[str],
    xs: Sequence[float],
    func: Function,
    derivatives: Sequence[float],
) -> None:
    """Write points, function values and derivatives to a text file."""
    with open(path, "w", encoding="utf-8") as out:
        out.write(_FILE_HEADER)
        for x, d in zip(xs, derivatives):
            out.write(f"{x:.3f} | {func(x):.6f} | {d:.5f}\n")


def read_points(path: str | PathLike[str], count: int) -> list[float]:
    """Read the first ``count`` values, one per line, from a dataset file."""
    if not MIN_POINTS <= count <= MAX_POINTS:
        raise ValueError(f"count must be between {MIN_POINTS} and {MAX_POINTS}, got {count}")
    with open(path, encoding="utf-8") as source:
        lines = list(islice(source, count))
    if len(lines) < count:
        raise ValueError(f"not enough lines in {Path(path)}: wanted {count}, found {len(lines)}")
    return [float(line.split()[0]) for line in lines]


def _benchmark(
    method: Callable[[Sequence[float], Function, int], list[float]],
    xs: Sequence[float],
    func: Function,
    output_path: str | PathLike[str],
    thread_counts: Iterable[int],
) -> list[Timing]:
    timings = []
    written = False
    for threads in thread_counts:
        start = time.perf_counter()
        derivatives = method(xs, func, threads)
        if not written:
            write_results(output_path, xs, func, derivatives)
            written = True
        timings.append(Timing(threads, time.perf_counter() - start))
    return timings


def benchmark_forward(
    xs: Sequence[float],
    func: Function,
    output_path: str | PathLike[str],
    thread_counts: Iterable[int] = DEFAULT_THREAD_COUNTS,
) -> list[Timing]:
    """Time forward differences per thread count; results are written once."""
    return _benchmark(parallel_forward_difference, xs, func, output_path, thread_counts)


def benchmark_backward(
    xs: Sequence[float],
    func: Function,
    output_path: str | PathLike[str],
    thread_counts: Iterable[int] = DEFAULT_THREAD_COUNTS,
) -> list[Timing]:
    """Time backward differences per thread count; results are written once."""
    return _benchmark(parallel_backward_difference, xs, func, output_path, thread_counts)
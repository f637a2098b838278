"""LU factorisation by Doolittle elimination and Crout's method, serial and threaded."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from os import PathLike
from typing import NamedTuple

Matrix = list[list[float]]

DEFAULT_SIZES = (64, 128, 256, 512, 1024, 2048, 4096)
DEFAULT_THREAD_COUNTS = (4, 8, 16, 32, 64)


class DecompositionError(ArithmeticError):
    """Raised when a factorisation cannot go on without a row exchange."""


class LUFactors(NamedTuple):
    """Lower factor with the pivots on its diagonal and unit upper factor."""

    lower: Matrix
    upper: Matrix


class MatrixTiming(NamedTuple):
    """Serial and parallel wall-clock times for one matrix size and thread count."""

    size: int
    threads: int
    serial_time: float
    parallel_time: float


def _square(matrix: Sequence[Sequence[float]]) -> Matrix:
    rows = [[float(value) for value in row] for row in matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _zeros(n: int) -> Matrix:
    return [[0.0] * n for _ in range(n)]


def _check_threads(num_threads: int) -> None:
    if num_threads < 1:
        raise ValueError(f"number of threads must be positive, got {num_threads}")


def _check_pivot(a: Matrix, k: int) -> None:
    if a[k][k] == 0:
        raise DecompositionError(f"zero pivot in row {k}: elimination needs a row exchange")


def _eliminate_row(a: Matrix, k: int, i: int) -> None:
    top, row = a[k], a[i]
    factor = row[k] / top[k]
    row[k:] = [value - factor * pivot_value for value, pivot_value in zip(row[k:], top[k:])]


def doolittle(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Eliminate below the diagonal and return the upper-triangular factor.

    The input is left untouched; a zero pivot raises DecompositionError.
    """
    a = _square(matrix)
    n = len(a)
    for k in range(n - 1):
        _check_pivot(a, k)
        for i in range(k + 1, n):
            _eliminate_row(a, k, i)
    return a


def parallel_doolittle(matrix: Sequence[Sequence[float]], num_threads: int) -> Matrix:
    """Doolittle elimination with the rows of each step spread over threads."""
    _check_threads(num_threads)
    a = _square(matrix)
    n = len(a)
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        for k in range(n - 1):
            _check_pivot(a, k)
            list(pool.map(partial(_eliminate_row, a, k), range(k + 1, n)))
    return a


def _crout_lower(a: Matrix, lower: Matrix, upper: Matrix, j: int, i: int) -> None:
    lower[i][j] = a[i][j] - sum(lower[i][k] * upper[k][j] for k in range(j))


def _crout_upper(a: Matrix, lower: Matrix, upper: Matrix, j: int, i: int) -> None:
    s = sum(lower[j][k] * upper[k][i] for k in range(j))
    upper[j][i] = (a[j][i] - s) / lower[j][j]


def _crout_pivot(lower: Matrix, j: int) -> None:
    if j < len(lower) - 1 and lower[j][j] == 0:
        raise DecompositionError("Crout decomposition not possible without row exchange")


def crout(matrix: Sequence[Sequence[float]]) -> LUFactors:
    """Factor a square matrix as L times U, with U carrying a unit diagonal."""
    a = _square(matrix)
    n = len(a)
    lower, upper = _zeros(n), _zeros(n)
    for j in range(n):
        upper[j][j] = 1.0
        for i in range(j, n):
            _crout_lower(a, lower, upper, j, i)
        _crout_pivot(lower, j)
        for i in range(j + 1, n):
            _crout_upper(a, lower, upper, j, i)
    return LUFactors(lower, upper)


def parallel_crout(matrix: Sequence[Sequence[float]], num_threads: int) -> LUFactors:
    """Crout's method with each column of L and row of U spread over threads."""
    _check_threads(num_threads)
    a = _square(matrix)
    n = len(a)
    lower, upper = _zeros(n), _zeros(n)
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        for j in range(n):
            upper[j][j] = 1.0
            list(pool.map(partial(_crout_lower, a, lower, upper, j), range(j, n)))
            _crout_pivot(lower, j)
            list(pool.map(partial(_crout_upper, a, lower, upper, j), range(j + 1, n)))
    return LUFactors(lower, upper)


def write_random_matrix(
    path: str | PathLike[str], n: int, rng: random.Random | None = None
) -> None:
    """Write an n-by-n matrix of uniform values in [0, 1), one row per line."""
    if n < 0:
        raise ValueError(f"matrix size must not be negative, got {n}")
    rng = rng if rng is not None else random.Random()
    with open(path, "w", encoding="utf-8") as out:
        for _ in range(n):
            out.write("".join(f"{rng.random():f} " for _ in range(n)) + "\n")


def read_matrix(path: str | PathLike[str], n: int) -> Matrix:
    """Read the first n*n whitespace-separated values of a file as a matrix."""
    if n < 0:
        raise ValueError(f"matrix size must not be negative, got {n}")
    with open(path, encoding="utf-8") as source:
        values = source.read().split()
    if len(values) < n * n:
        raise ValueError(f"not enough values for a {n}x{n} matrix: found {len(values)}")
    numbers = [float(value) for value in values[: n * n]]
    return [numbers[row * n:(row + 1) * n] for row in range(n)]


def _time(func: Callable[[], object]) -> float:
    start = time.perf_counter()
    func()
    return time.perf_counter() - start


def _benchmark(
    serial: Callable[[Matrix], object],
    parallel: Callable[[Matrix, int], object],
    matrix: Matrix,
    thread_counts: Iterable[int],
) -> list[MatrixTiming]:
    n = len(matrix)
    serial_time = _time(lambda: serial(matrix))
    return [
        MatrixTiming(n, threads, serial_time, _time(lambda: parallel(matrix, threads)))
        for threads in thread_counts
    ]


def benchmark_doolittle(
    path: str | PathLike[str],
    sizes: Iterable[int] = DEFAULT_SIZES,
    thread_counts: Iterable[int] = DEFAULT_THREAD_COUNTS,
    rng: random.Random | None = None,
) -> list[MatrixTiming]:
    """Generate a random matrix file per size and time Doolittle elimination on it."""
    counts = tuple(thread_counts)
    timings = []
    for n in sizes:
        write_random_matrix(path, n, rng)
        timings.extend(_benchmark(doolittle, parallel_doolittle, read_matrix(path, n), counts))
    return timings


def benchmark_crout(
    path: str | PathLike[str],
    sizes: Iterable[int] = DEFAULT_SIZES,
    thread_counts: Iterable[int] = DEFAULT_THREAD_COUNTS,
) -> list[MatrixTiming]:
    """Time Crout's method on matrices read from an existing file, per size."""
    counts = tuple(thread_counts)
    timings = []
    for n in sizes:
        timings.extend(_benchmark(crout, parallel_crout, read_matrix(path, n), counts))
    return timings
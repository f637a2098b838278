"""Evenly spaced sample points for the differentiation benchmarks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import accumulate, repeat
from os import PathLike

DEFAULT_OUTPUT = "test.csv"
DEFAULT_START = 0.0001
DEFAULT_STEP = 0.001
DEFAULT_COUNT = 1001


def grid_points(
    start: float = DEFAULT_START, step: float = DEFAULT_STEP, count: int = DEFAULT_COUNT
) -> list[float]:
    """Return ``count`` points from ``start``, each one ``step`` after the last."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return list(accumulate(repeat(step, count - 1), initial=start))[:count]


def write_grid_dataset(
    path: str | PathLike[str],
    start: float = DEFAULT_START,
    step: float = DEFAULT_STEP,
    count: int = DEFAULT_COUNT,
) -> None:
    """Write the grid points to a file, one value with six decimals per line."""
    points = grid_points(start, step, count)
    with open(path, "w", encoding="utf-8") as out:
        out.writelines(f"{x:f}\n" for x in points)


def main(argv: Sequence[str] | None = None) -> int:
    """Write a dataset of evenly spaced points."""
    parser = argparse.ArgumentParser(description="Write evenly spaced sample points.")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--start", type=float, default=DEFAULT_START)
    parser.add_argument("--step", type=float, default=DEFAULT_STEP)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    args = parser.parse_args(argv)
    try:
        write_grid_dataset(args.output, args.start, args.step, args.count)
    except (OSError, ValueError) as error:
        print(f"Error writing dataset: {error}", file=sys.stderr)
        return 1
    print(f"Wrote {args.count} values to {args.output}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
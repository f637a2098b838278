"""Interactive menu that runs the numerical benchmarks."""

from __future__ import annotations

import argparse
import re
import sys
import time
from collections.abc import Callable, Sequence
from functools import partial
from itertools import groupby
from pathlib import Path
from typing import TextIO

from parnumerics import differentiation, integration, linear_systems

InputFunc = Callable[[str], str]

PAUSE_SECONDS = 8
CLEAR_SCREEN = "\033[H\033[J"
DATASET = "num_diff_dataset.csv"
FORWARD_OUTPUT = "forward_output.csv"
BACKWARD_OUTPUT = "backward_output.csv"
MATRIX_FILE = "matrix.txt"

_PAD = "\t" * 5
_SEPARATOR = f"\n{_PAD}{'-' * 53}\n\n\n"
_PROMPT = f"\n\n{_PAD}Enter choice: "
_INTEGER = re.compile(r"\s*([+-]?\d+)")


def read_choice(prompt: str, input_func: InputFunc = input) -> int | None:
    """Ask for an integer; return None when the reply does not start with one."""
    match = _INTEGER.match(input_func(prompt))
    return int(match.group(1)) if match else None


def _read_count(input_func: InputFunc, out: TextIO, forward: bool) -> int:
    if forward:
        prompt = "Enter the number of values of x to read (2-100000): "
    else:
        prompt = "Enter the number of values of x you want to read (between 2 and 100000): "
    while True:
        count = read_choice(prompt, input_func)
        if count is not None and differentiation.MIN_POINTS <= count <= differentiation.MAX_POINTS:
            return count
        if not forward:
            out.write("Invalid input. Please enter a value between 2 and 100000.\n")


def _run_difference(input_func: InputFunc, out: TextIO, forward: bool) -> None:
    count = _read_count(input_func, out, forward)
    try:
        xs = differentiation.read_points(DATASET, count)
    except OSError as error:
        out.write(f"Error opening file: {error.strerror or error}\n")
        return
    except ValueError as error:
        out.write(f"Error: {error}\n")
        return

    func = differentiation.example_function
    if forward:
        output_path, name = FORWARD_OUTPUT, "Forward"
        bench, serial = differentiation.benchmark_forward, differentiation.forward_difference
        out.write("Function and its Derivative (1 Thread):\n")
    else:
        output_path, name = BACKWARD_OUTPUT, "Backward"
        bench, serial = differentiation.benchmark_backward, differentiation.backward_difference

    try:
        timings = bench(xs, func, output_path)
    except ValueError as error:
        out.write(f"Error: {error}\n")
        return
    out.write("\n")
    for timing in timings:
        label = "1 Thread" if timing.threads == 1 else f"{timing.threads} Threads"
        out.write(f"Execution Time ({label}): {timing.seconds:f} seconds\n\n")

    start = time.perf_counter()
    derivatives = serial(xs, func)
    out.write(differentiation.format_table(xs, func, derivatives))
    differentiation.write_results(output_path, xs, func, derivatives)
    elapsed = time.perf_counter() - start
    out.write(f"\nSerial Computation Time ({name} Difference): {elapsed:f} seconds\n\n")


def _run_integration(input_func: InputFunc, out: TextIO, simpsons: bool) -> None:
    border = "+------------------+------------------+------------------+"
    if simpsons:
        title = "|                Simpson's 1/3  Rule - Parallel Execution Performance               |"
        border += "--------------------------+"
        serial, parallel = integration.simpson, integration.parallel_simpson
    else:
        title = "|                  Trapezoidal Rule - Parallel Execution Performance                  |"
        border += "----------------------------+"
        serial, parallel = integration.trapezoidal, integration.parallel_trapezoidal
    out.write(f"{_PAD}{border}\n{_PAD}{title}\n{_PAD}{border}\n")

    values = []
    for prompt in ("Enter Lower limit: ", "Enter Upper limit: ", "Enter Number of Intervals: "):
        value = read_choice(_PAD + prompt, input_func)
        if value is None:
            out.write(f"{_PAD}Invalid input.\n")
            return
        values.append(value)
    a, b, n = values

    try:
        rows = integration.benchmark(serial, parallel, integration.integrand, a, b, n)
    except ValueError as error:
        out.write(f"{_PAD}Error: {error}\n")
        return
    for row in rows:
        out.write(f"{_PAD}Parallel Execution with {row.threads:2d} Threads:\n")
        out.write(
            integration.format_results_table(
                row.serial_result, row.parallel_result,
                row.serial_time, row.parallel_time, row.threads,
            )
        )


def _run_decomposition(out: TextIO, doolittle: bool) -> None:
    if not Path(MATRIX_FILE).is_file():
        out.write(f"{_PAD}Error opening file.\n")
        return
    if doolittle:
        border = "+--------------+-------------+------------+----------------------------------------------+"
        title = "|    Matrix Size             |        ThreadsSerial Time     |          Parallel Time    |"
        unit = ""
    else:
        border = "+--------------+-------------+------------+--------------+---------------------------------+"
        title = "| # of processes               Serial Time                           Parallel Time         |"
        unit = "s"
    out.write(f"{_PAD}{border}\n{_PAD}{title}\n{_PAD}{border}\n")

    try:
        if doolittle:
            timings = linear_systems.benchmark_doolittle(MATRIX_FILE)
        else:
            timings = linear_systems.benchmark_crout(MATRIX_FILE)
    except linear_systems.DecompositionError:
        out.write(f"{_PAD}Crout decomposition not possible without row exchange\n")
        return
    except (OSError, ValueError) as error:
        out.write(f"{_PAD}Error: {error}\n")
        return

    for size, group in groupby(timings, key=lambda timing: timing.size):
        out.write(f"\n{_PAD}Size of Matrix: {size}\n\n")
        for timing in group:
            out.write(
                f"{_PAD}{timing.threads}\t\t\t\t{timing.serial_time:0.6f}{unit}"
                f"\t\t\t\t{timing.parallel_time:0.6f}{unit}\n"
            )


def _submenu(
    input_func: InputFunc, out: TextIO, first: str, second: str
) -> int | None:
    out.write(f"\n{_PAD}1. {first}\n\n{_PAD}2. {second}\n\n{_PAD}3. Go back")
    choice = read_choice(_PROMPT, input_func)
    out.write(_SEPARATOR)
    return choice


def run_menu(
    input_func: InputFunc = input,
    output: TextIO | None = None,
    pause: Callable[[], None] | None = None,
) -> int:
    """Run the interactive menu until the user exits or input ends."""
    out = output if output is not None else sys.stdout
    wait = pause if pause is not None else partial(time.sleep, PAUSE_SECONDS)
    try:
        out.write(f"\n\n\n{_PAD}{'-' * 53}")
        out.write(f"\n\n{_PAD}Welcome to Numerical Integration Code!")
        out.write(f"\n\n{_PAD}1. Choose Methods\n\n{_PAD}2. Exit")
        choice = read_choice(_PROMPT, input_func)
        out.write(_SEPARATOR)
        if choice != 1:
            return 0

        while True:
            out.write(f"{_PAD}1. Numerical Differentation")
            out.write(f"\n\n{_PAD}2. Numerical Integration")
            out.write(f"\n\n{_PAD}3. Linear Matrix Systems")
            out.write(f"\n\n{_PAD}4. Exit")
            section = read_choice(_PROMPT, input_func)
            out.write(_SEPARATOR)

            if section == 1:
                method = _submenu(input_func, out, "Forward Difference Method",
                                  "Backward Difference Method\n")
                action = {
                    1: partial(_run_difference, input_func, out, True),
                    2: partial(_run_difference, input_func, out, False),
                }.get(method)
            elif section == 2:
                method = _submenu(input_func, out, "Composite Simpsons 1/3rd Rule",
                                  "Composite Trapezoidal rule\n")
                action = {
                    1: partial(_run_integration, input_func, out, True),
                    2: partial(_run_integration, input_func, out, False),
                }.get(method)
            elif section == 3:
                method = _submenu(input_func, out, "LU using Dolittle approach",
                                  "LU using Crouts approach\n")
                action = {
                    1: partial(_run_decomposition, out, True),
                    2: partial(_run_decomposition, out, False),
                }.get(method)
            else:
                return 0

            if action is not None:
                action()
                wait()
                out.write("\n\n\n\n\n")
            elif method == 3:
                out.write(CLEAR_SCREEN)
    except EOFError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive benchmark menu."""
    parser = argparse.ArgumentParser(
        description="Benchmark numerical differentiation, integration and LU factorisation."
    )
    parser.parse_args(argv)
    return run_menu(input, sys.stdout, partial(time.sleep, PAUSE_SECONDS))


if __name__ == "__main__":
    sys.exit(main())
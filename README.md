# parnumerics

Classic numerical methods, each in a plain serial form and a threaded form,
with helpers that time the two side by side.

- `parnumerics.differentiation`: forward and backward finite differences
  over a list of points.
- `parnumerics.integration`: composite Simpson's 1/3 rule and the composite
  trapezoidal rule.
- `parnumerics.linear_systems`: LU factorisation by Doolittle elimination
  and by Crout's method.
- `parnumerics.dataset`: evenly spaced sample points for the
  differentiation benchmarks.
- `parnumerics.cli`: the interactive menu.

No third-party libraries are needed.

## Installation

```
pip install .
```

With the test extra:

```
pip install ".[test]"
pytest
```

## Generating a dataset

```
parnumerics-dataset -o num_diff_dataset.csv
```

writes evenly spaced points, one per line with six decimals. Without `-o`
the file is `test.csv`. `--start` (default `0.0001`), `--step` (default
`0.001`) and `--count` (default `1001`) set the grid.

## Interactive menu

```
parnumerics
```

opens a text menu. Choose `1` to go on to the methods, then:

1. **Numerical differentiation** — forward or backward differences of
   `x * x`. Asks how many points to read (2 to 100000) from
   `num_diff_dataset.csv` in the current directory, times the threaded
   version with 1, 2, 4, 6, 8 and 10 threads, prints a table of `x`, `f(x)`
   and the derivative, and writes it to `forward_output.csv` or
   `backward_output.csv`.
2. **Numerical integration** — Simpson's rule or the trapezoidal rule for
   `2 / (x^2 + 4)`. Asks for integer lower and upper limits and a number of
   intervals, then prints serial and threaded results and times for 4, 8,
   16, 32 and 64 threads.
3. **Linear matrix systems** — Doolittle or Crout. Both need `matrix.txt`
   to exist in the current directory. The Doolittle benchmark overwrites it
   with a fresh random matrix for each size (64 up to 4096); the Crout
   benchmark reads the first `n*n` values of the existing file for each
   size, so the file must hold at least 4096 × 4096 values.

After each run the menu waits eight seconds before showing itself again.
Option `4`, or the end of input, leaves the menu.

## Using the library

```python
from parnumerics.differentiation import forward_difference, example_function
from parnumerics.integration import simpson, trapezoidal, integrand
from parnumerics.linear_systems import doolittle, crout

xs = [0.0, 0.5, 1.0, 1.5]
print(forward_difference(xs, example_function))

print(simpson(integrand, 0, 2, 100))
print(trapezoidal(integrand, 0, 2, 100))

print(doolittle([[4.0, 3.0], [6.0, 3.0]]))   # upper-triangular factor
factors = crout([[4.0, 3.0], [6.0, 3.0]])
print(factors.lower, factors.upper)           # U has a unit diagonal
```

`doolittle` and `crout` raise `DecompositionError` when a zero pivot means
the factorisation cannot go on without a row exchange. Inputs are never
modified.

Each method has a threaded counterpart that takes the number of worker
threads: `parallel_forward_difference`, `parallel_backward_difference`,
`parallel_simpson`, `parallel_trapezoidal`, `parallel_doolittle` and
`parallel_crout`. Note that `parallel_trapezoidal` weights interior points
4 and 2 with a factor `h/3`, so its value agrees with Simpson's rule rather
than with `trapezoidal`.

Benchmark helpers:

- `differentiation.benchmark_forward` / `benchmark_backward` return a list
  of `Timing(threads, seconds)` and write the results file once.
- `integration.benchmark(serial, parallel, func, a, b, n, thread_counts)`
  returns a list of `BenchmarkRow`; `format_results_table` renders one.
- `linear_systems.benchmark_doolittle` / `benchmark_crout` return a list of
  `MatrixTiming(size, threads, serial_time, parallel_time)`.
- `linear_systems.write_random_matrix` and `read_matrix` write and read
  matrix files; `differentiation.read_points` reads a points file.

## What it does not do

The threaded versions use Python thread pools, which share one interpreter
lock, so their timings show the cost of spreading the work rather than a
parallel speed-up. There is no pivoting: matrices that need a row exchange
are rejected, not factored.
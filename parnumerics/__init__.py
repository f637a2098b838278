"""Finite differences, quadrature and LU factorisation, serial and threaded, with timing benchmarks."""

__version__ = "0.1.0"
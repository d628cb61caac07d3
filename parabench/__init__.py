"""Parallel-computing benchmarks: wavefront grid, hybrid prime sieve and sub-matrix aggregation."""

__version__ = "0.1.0"
__all__ = ["matrix", "sieve", "wavefront"]
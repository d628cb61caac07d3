"""Wavefront grid computation: each cell is the sum of its top and left neighbours."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

N = 10001
TS = 1000

Grid = list[list[int]]


def _add32(a: int, b: int) -> int:
    """Add two values with 32-bit signed wrap-around."""
    total = (a + b) & 0xFFFFFFFF
    return total - 0x100000000 if total & 0x80000000 else total


def init_grid(n: int) -> Grid:
    """Return an n x n grid of zeros whose first row and column are ones."""
    if n < 0:
        raise ValueError("grid size must be non-negative")
    grid = [[0] * n for _ in range(n)]
    if n:
        grid[0] = [1] * n
        for row in grid:
            row[0] = 1
    return grid


def validate_grid(grid: Grid) -> bool:
    """Check that every inner cell equals the sum of its top and left cells."""
    return all(
        cur == _add32(up, left)
        for above, row in zip(grid, grid[1:])
        for cur, up, left in zip(row[1:], above[1:], row)
    )


def sequential_wavefront(grid: Grid) -> Grid:
    """Fill the grid row by row and return the filled copy."""
    result = [row[:] for row in grid]
    for above, row in zip(result, result[1:]):
        for j in range(1, len(row)):
            row[j] = _add32(above[j], row[j - 1])
    return result


def _fill_block(grid: Grid, ii: int, jj: int, size: int) -> None:
    for i in range(ii, min(ii + size, len(grid))):
        row, above = grid[i], grid[i - 1]
        for j in range(jj, min(jj + size, len(row))):
            row[j] = _add32(above[j], row[j - 1])


def parallel_wavefront(grid: Grid, block_size: int = TS, workers: int | None = None) -> Grid:
    """Fill the grid block by block, running blocks on one anti-diagonal concurrently."""
    if block_size < 1:
        raise ValueError("block size must be positive")
    result = [row[:] for row in grid]
    starts = list(range(1, len(result), block_size))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for diagonal in range(2 * len(starts) - 1):
            batch = [
                (ii, jj)
                for a, ii in enumerate(starts)
                for b, jj in enumerate(starts)
                if a + b == diagonal
            ]
            list(pool.map(lambda block: _fill_block(result, *block, block_size), batch))
    return result


def measure_execution_time(grid: Grid, func: Callable[[Grid], Grid]) -> Grid:
    """Run a wavefront computation, print how long it took, and return its result."""
    start = time.perf_counter_ns()
    result = func(grid)
    elapsed = (time.perf_counter_ns() - start) // 1000
    print(f"Execution Time: {elapsed} microseconds")
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sequential and parallel wavefront benchmark.")
    parser.add_argument("--size", type=int, default=N, help="grid size")
    parser.add_argument("--block", type=int, default=TS, help="parallel block size")
    parser.add_argument("--workers", type=int, default=None, help="number of worker threads")
    args = parser.parse_args(argv)

    grid = init_grid(args.size)

    print()
    print("Sequential Execution")
    sequential_out = measure_execution_time(grid, sequential_wavefront)
    print(f"Is valid: {int(validate_grid(sequential_out))}")

    print()
    print("Parallel Execution")
    parallel_out = measure_execution_time(
        grid, lambda g: parallel_wavefront(g, args.block, args.workers)
    )
    print(f"Is valid: {int(validate_grid(parallel_out))}")
    return 0
"""Sieve of Eratosthenes, sequential and split across simulated tasks."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from math import isqrt
from operator import and_

N = 100_000_000
N_PROC = 2


def _ones(size: int) -> bytearray:
    return bytearray(b"\x01") * size


def sequential_sieve(n: int) -> bytearray:
    """Return flags for 0..n where composites (from 4 upward) are cleared.

    Indices 0 and 1 are left set, as are the primes.
    """
    if n < 0:
        raise ValueError("limit must be non-negative")
    flags = _ones(n + 1)
    for p in range(2, isqrt(n) + 1):
        if flags[p]:
            flags[2 * p :: p] = bytes(len(range(2 * p, n + 1, p)))
    return flags


def mark_composites(flags: bytearray, primes: Iterable[int], start: int, end: int) -> None:
    """Clear the multiples of each prime inside [start, end), leaving the prime itself."""
    if end > len(flags):
        raise ValueError("range end lies beyond the flags")
    for p in primes:
        if p < 1:
            raise ValueError("primes must be positive")
        first = p if start <= p < end else (start // p) * p
        saved = flags[p] if first <= p < end else None
        flags[first:end:p] = bytes(len(range(first, end, p)))
        if saved is not None:
            flags[p] = saved


def partition(n: int, num_tasks: int) -> list[tuple[int, int]]:
    """Split 0..n into per-task [start, end) ranges.

    Task 0 takes 0..isqrt(n); the rest is shared by the other tasks, the last
    one taking any remainder.
    """
    if num_tasks < 2:
        raise ValueError("at least two tasks are required")
    if n < 1:
        raise ValueError("limit must be at least 1")
    root = isqrt(n)
    chunk, extra = divmod(n - root, num_tasks - 1)
    ranges = [(0, root + 1)]
    for rank in range(1, num_tasks):
        start = root + 1 + (rank - 1) * chunk
        end = start + chunk + (extra if rank == num_tasks - 1 else 0)
        ranges.append((start, end))
    return ranges


def base_primes(limit: int) -> list[int]:
    """Return the primes up to and including limit."""
    if limit < 2:
        return []
    flags = _ones(limit + 1)
    flags[0] = flags[1] = 0
    primes = []
    for i, flag in enumerate(flags):
        if flag:
            primes.append(i)
            mark_composites(flags, [i], 0, limit + 1)
    return primes


def hybrid_sieve(n: int, num_tasks: int = N_PROC) -> bytearray:
    """Sieve 0..n by giving each task its own range and AND-reducing the results."""
    ranges = partition(n, num_tasks)
    primes = base_primes(isqrt(n))

    def run(bounds: tuple[int, int]) -> int:
        local = _ones(n + 1)
        mark_composites(local, primes, *bounds)
        return int.from_bytes(local, "little")

    with ThreadPoolExecutor(max_workers=num_tasks) as pool:
        combined = reduce(and_, pool.map(run, ranges))
    return bytearray(combined.to_bytes(n + 1, "little"))


def primes_from_flags(flags: bytearray) -> list[int]:
    """Return the indices from 2 upward whose flag is set."""
    return [i for i, flag in enumerate(flags) if flag and i >= 2]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Hybrid and sequential prime sieve benchmark.")
    parser.add_argument("--limit", type=int, default=N, help="inclusive upper limit")
    parser.add_argument("--tasks", type=int, default=N_PROC, help="number of tasks")
    args = parser.parse_args(argv)

    start_p = time.perf_counter_ns()
    parallel = hybrid_sieve(args.limit, args.tasks)
    duration_p = (time.perf_counter_ns() - start_p) // 1000

    start_s = time.perf_counter_ns()
    sequential = sequential_sieve(args.limit)
    duration_s = (time.perf_counter_ns() - start_s) // 1000

    print(f"Parallel Time: {duration_p} microseconds")
    print(f"Sequential Time: {duration_s} microseconds")
    print(f"Is parallel answer valid: {'Yes' if parallel == sequential else 'No'}")
    print(f"Speedup: {duration_s / max(duration_p, 1):g}")
    return 0
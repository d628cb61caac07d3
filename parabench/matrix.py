"""Generation of per-task random sub-matrices and their gathering at a root."""

from __future__ import annotations

import argparse
import random
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

K = 500
N_WORKERS = 5


@dataclass
class SubMatrix:
    """A k x k block of values in row-major order."""

    rows: int
    cols: int
    data: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.data) != self.rows * self.cols:
            raise ValueError("data length does not match the dimensions")


@dataclass
class VerificationReport:
    """Outcome of checking the gathered sub-matrices at the root."""

    received: int
    total_rows: int
    expected_total_rows: int
    mismatches: list[tuple[int, int, int]] = field(default_factory=list)

    @property
    def successful(self) -> bool:
        return self.total_rows == self.expected_total_rows and not self.mismatches


def random_submatrix(k: int, rng: random.Random | None = None) -> SubMatrix:
    """Return a k x k sub-matrix of values in 0..99."""
    if k < 1:
        raise ValueError("sub-matrix size must be positive")
    rng = rng or random.Random()
    return SubMatrix(k, k, [rng.randrange(100) for _ in range(k * k)])


def gather_submatrices(num_tasks: int, k: int, seed: int | None = None) -> list[SubMatrix]:
    """Have each task build its own sub-matrix, seeded by seed + rank, and gather them in rank order."""
    if num_tasks < 1:
        raise ValueError("at least one task is required")
    base = int(time.time()) if seed is None else seed
    with ThreadPoolExecutor(max_workers=num_tasks) as pool:
        return list(pool.map(lambda rank: random_submatrix(k, random.Random(base + rank)), range(num_tasks)))


def verify_gathered(matrices: list[SubMatrix], k: int) -> VerificationReport:
    """Check the dimensions of every gathered sub-matrix and the total row count."""
    mismatches = [
        (index, matrix.rows, matrix.cols)
        for index, matrix in enumerate(matrices)
        if matrix.rows != k or matrix.cols != k
    ]
    return VerificationReport(
        received=len(matrices),
        total_rows=sum(matrix.rows for matrix in matrices),
        expected_total_rows=len(matrices) * k,
        mismatches=mismatches,
    )


def sequential_aggregation(
    k: int, workers: int, rng: random.Random | None = None
) -> tuple[list[list[int]], int]:
    """Build the full (k*workers)-square matrix in one go; return it and the microseconds taken."""
    rng = rng or random.Random()
    size = k * workers
    start = time.perf_counter_ns()
    matrix = [[rng.randrange(100) for _ in range(size)] for _ in range(size)]
    elapsed = (time.perf_counter_ns() - start) // 1000
    return matrix, elapsed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sub-matrix gathering benchmark.")
    parser.add_argument("--workers", type=int, default=N_WORKERS, help="number of tasks")
    parser.add_argument("--k", type=int, default=K, help="sub-matrix size")
    parser.add_argument("--seed", type=int, default=None, help="base random seed")
    args = parser.parse_args(argv)

    start_p = time.perf_counter_ns()
    gathered = gather_submatrices(args.workers, args.k, args.seed)
    duration_p = (time.perf_counter_ns() - start_p) // 1000

    print()
    print("--- Root Process Verification ---")
    print(f"Received {len(gathered)} matrices.")

    report = verify_gathered(gathered, args.k)
    for index, rows, cols in report.mismatches:
        print(f"ERROR: Inconsistency found in matrix dimensions from process {index}", file=sys.stderr)
        print(f"  Expected ({args.k}x{args.k}), Got ({rows}x{cols})", file=sys.stderr)

    print(f"Total rows received: {report.total_rows}")
    print(f"Expected total rows: {report.expected_total_rows}")
    if report.successful:
        print("Verification successful: Total rows match and dimensions are consistent.")
    else:
        print("Verification FAILED!", file=sys.stderr)

    _, seq_dur = sequential_aggregation(args.k, args.workers)
    print(f"Parallel execution Time: {duration_p} microseconds")
    print(f"Sequential execution Time: {seq_dur} microseconds")
    print(f"Speedup: {seq_dur // max(duration_p, 1)}")
    return 0
# parabench

Three small benchmarks that time a sequential computation against a
version that splits the work across tasks, and check that the split
version gives the right answer.

- **Wavefront** (`parabench.wavefront`) fills a square grid whose first
  row and first column are 1 and in which every other cell is the sum of
  the cell above it and the cell to its left, with 32-bit signed
  wrap-around. The parallel version cuts the grid into square blocks and
  runs the blocks on each anti-diagonal at the same time on a thread pool.
- **Hybrid sieve** (`parabench.sieve`) marks the primes up to an
  inclusive limit. Task 0 takes `0..isqrt(n)` and the rest of the range
  is shared equally among the other tasks, the last one taking any
  remainder. The base primes up to `isqrt(n)` are found first, each task
  clears multiples in its own range, and the per-task flags are combined
  with a logical AND. The result is compared with a plain sieve of
  Eratosthenes.
- **Matrix aggregation** (`parabench.matrix`) has each task build a
  random `k x k` sub-matrix with values in `0..99`, seeded with
  `seed + rank`, gathers them in rank order and checks their dimensions
  and the total row count. The run is timed against building one
  `(k*workers)`-square matrix in one go.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Each benchmark has its own command:

```
parabench-wavefront [--size N] [--block N] [--workers N]
parabench-sieve [--limit N] [--tasks N]
parabench-matrix [--workers N] [--k N] [--seed N]
```

- `parabench-wavefront` prints the time taken by the sequential and by
  the block-parallel fill, each followed by `Is valid: 1` or `0`.
  Defaults: `--size 10001`, `--block 1000`, `--workers` left to the
  thread pool.
- `parabench-sieve` prints the parallel and sequential times, whether the
  two flag arrays are identical (`Yes`/`No`) and the speedup.
  Defaults: `--limit 100000000`, `--tasks 2` (at least two are needed).
- `parabench-matrix` prints how many sub-matrices were received, the
  total and expected row counts, whether verification succeeded, both
  times and the integer speedup. Dimension errors go to standard error.
  Defaults: `--workers 5`, `--k 500`; without `--seed` the base seed is
  the current time in seconds.

The defaults are large; smaller values give quicker runs.

## Library use

```python
from parabench.wavefront import init_grid, sequential_wavefront, parallel_wavefront, validate_grid

grid = init_grid(9)
assert validate_grid(sequential_wavefront(grid))
assert validate_grid(parallel_wavefront(grid, 4, 2))
```

`measure_execution_time(grid, func)` runs a fill, prints its time in
microseconds and returns the result. The fills return a new grid and
leave the input unchanged.

```python
from parabench.sieve import sequential_sieve, hybrid_sieve, primes_from_flags

flags = hybrid_sieve(100, 3)
assert flags == sequential_sieve(100)
print(primes_from_flags(flags))
```

Both sieves return a `bytearray` of flags for `0..n` in which indices 0
and 1 stay set along with the primes; `primes_from_flags` lists the set
indices from 2 upward. `partition(n, num_tasks)`, `base_primes(limit)`
and `mark_composites(flags, primes, start, end)` expose the individual
steps.

```python
from parabench.matrix import gather_submatrices, verify_gathered

matrices = gather_submatrices(5, 10, 1234)
report = verify_gathered(matrices, 10)
assert report.successful
```

`verify_gathered` returns a `VerificationReport` with the number of
sub-matrices received, the total and expected row counts, and an
`(index, rows, cols)` entry for every `SubMatrix` whose dimensions are
wrong. `random_submatrix(k, rng)` builds one sub-matrix and
`sequential_aggregation(k, workers, rng)` returns the full matrix with
the microseconds it took.

## What it does not do

Tasks run as threads inside a single Python process. Nothing is spread
over several processes or machines, and there is no message passing
between them, so timings show the overhead of the split rather than a
real speedup.
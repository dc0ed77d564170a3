# closestpair

Algorithms for the closest pair of points in the plane, together with a
command-line benchmark. The benchmark times an algorithm over a range of input
sizes and writes timing statistics to a CSV file.

## Installation

```
pip install .
```

To run the tests, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Library

Points are `(x, y)` tuples of floats.

### `closestpair.geometry`

- `dist(a, b)` returns the Euclidean distance between two points.
  `dist_squared(a, b)` returns its square.
- `brute_force(points)` checks every pair of points and returns the smallest
  distance. When there are fewer than two points, or when every pair is
  farther apart than 10,000,000, it returns 10,000,000.
- `better_brute_force(points)` checks every pair and returns the smallest
  **squared** distance. When there is no pair it returns `math.inf`.
- `divide_and_conquer(points, lo=0, hi=None)` and
  `divide_and_conquer_squared(points, lo=0, hi=None)` run a recursive
  closest-pair search on `points[lo:hi]` and return the smallest distance.
  `hi` defaults to `len(points)`. The second function compares squared
  distances internally. The result is exact only when the points are sorted by
  x. A slice with fewer than two points raises `ValueError`. A range that
  falls outside the sequence raises `IndexError`.
- `random_points(count, rng=None, min_coord=100, max_coord=1100)` returns
  `count` points. Each coordinate is drawn uniformly between `min_coord` and
  `max_coord`.
- `random_int_points(count, rng=None)` returns `count` points whose
  coordinates are integer values from 0 to 100, stored as floats.

`rng` is a `random.Random`. When none is given, a fresh, unseeded one is used.

```python
import random
from closestpair.geometry import random_points, divide_and_conquer

rng = random.Random(1)
pts = sorted(random_points(1000, rng))
print(divide_and_conquer(pts))
```

### `closestpair.stats`

- `quartiles(data)` returns the minimum, lower quartile, median, upper
  quartile and maximum as a 5-tuple. It finds them by sorting.
- `quartiles_nth(data)` returns the same five values. It finds them by
  selection instead of a full sort.

  Both functions raise `QuartileError` (a subclass of `ValueError`) when there
  are fewer than four values.
- `mean_stdev(values)` returns the mean and the unbiased (n − 1) standard
  deviation. It raises `ValueError` when there are fewer than two values.

### `closestpair.cli`

- `parse_args(argv)` turns `[filename, RUNS, LOWER, UPPER, STEP]` into a
  `BenchmarkConfig`. It raises `UsageError` when there are not exactly five
  arguments, when an argument is not an integer, or when an integer is outside
  the signed 64-bit range.
- `BenchmarkConfig(output, runs, lower, upper, step)` checks its values when
  it is created. Its `sizes` property is the range of point counts to
  benchmark. Its `total_runs` property is the number of timed runs.
- `run_benchmark(config, algorithm=None, rng=None, stream=None, progress=None)`
  times `algorithm` on random point sets and writes the CSV, then returns the
  rows.
  - The default `algorithm` is `divide_and_conquer_squared`.
  - The CSV goes to `stream` when one is given, otherwise to `config.output`.
  - `progress`, when given, is called as `progress(done, total)` before each
    run.
- `render_progress(done, total)` returns the 70-column progress bar as a
  string.

## Benchmark command

```
closestpair-bench <filename> <RUNS> <LOWER> <UPPER> <STEP>
```

For every `n` from `LOWER` to `UPPER`, stepping by `STEP`, the command times
`divide_and_conquer_squared` over `RUNS` runs. Each run uses a new set of `n`
random points with coordinates between 100 and 1100. The points are not sorted
before timing. The command writes one CSV line per `n`:

```
n,t_mean,t_stdev,t_Q0,t_Q1,t_Q2,t_Q3,t_Q4
```

- Times are in nanoseconds.
- The standard deviation is the unbiased (n − 1) one.
- `t_Q0` to `t_Q4` are the five values that `quartiles` returns.

The arguments must meet these conditions:

- `RUNS` must be at least 4.
- `LOWER`, `UPPER` and `STEP` must be positive.
- `LOWER` must not be greater than `UPPER`.

If an argument is invalid, the command prints the reason to standard error and
exits with status 1. While the benchmark runs, a progress bar is drawn on
standard error.

The command does not let you choose the algorithm. To time another function,
call `run_benchmark` with that function.
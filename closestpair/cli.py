"""Command-line timing benchmark for the closest-pair algorithms."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from closestpair.geometry import Point, divide_and_conquer_squared, random_points
from closestpair.stats import mean_stdev, quartiles

CSV_HEADER = "n,t_mean,t_stdev,t_Q0,t_Q1,t_Q2,t_Q3,t_Q4"
PROGRESS_WIDTH = 70

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

USAGE = "\n".join(
    [
        "Usage: <filename> <RUNS> <LOWER> <UPPER> <STEP>",
        "<filename> is the name of the file where performance data will be written.",
        "It is recommended for <filename> to have .csv extension and it should not previously exist.",
        "<RUNS>: numbers of runs per test case: should be >= 32.",
        "<LOWER> <UPPER> <STEP>: range of test cases.",
        "These should all be positive.",
    ]
)

Algorithm = Callable[[list[Point]], object]
Progress = Callable[[int, int], None]
Row = tuple[int, float, float, float, float, float, float, float]


class UsageError(ValueError):
    """Raised when the command-line arguments are missing or invalid."""


@dataclass(frozen=True)
class BenchmarkConfig:
    """Where to write results, how many runs per size, and the range of sizes."""

    output: Path
    runs: int
    lower: int
    upper: int
    step: int

    def __post_init__(self) -> None:
        if self.runs < 4:
            raise UsageError("<RUNS> must be at least 4.")
        if self.step <= 0 or self.lower <= 0 or self.upper <= 0:
            raise UsageError("<STEP>, <LOWER> and <UPPER> have to be positive.")
        if self.lower > self.upper:
            raise UsageError("<LOWER> must be at most equal to <UPPER>.")

    @property
    def sizes(self) -> range:
        """The point counts that are benchmarked, in order."""
        return range(self.lower, self.upper + 1, self.step)

    @property
    def total_runs(self) -> int:
        """Number of timed runs over the whole benchmark."""
        return self.runs * len(self.sizes)


def _parse_int(text: str) -> int:
    try:
        value = int(text.strip())
    except ValueError:
        raise UsageError(f"invalid integer argument: {text!r}") from None
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise UsageError(f"integer argument out of range: {text!r}")
    return value


def parse_args(argv: Sequence[str]) -> BenchmarkConfig:
    """Build a configuration from ``<filename> <RUNS> <LOWER> <UPPER> <STEP>``."""
    if len(argv) != 5:
        raise UsageError(USAGE)
    filename, *numbers = argv
    runs, lower, upper, step = (_parse_int(text) for text in numbers)
    return BenchmarkConfig(Path(filename), runs, lower, upper, step)


def render_progress(done: int, total: int) -> str:
    """A terminal progress bar for ``done`` out of ``total`` runs."""
    progress = done / total
    filled = int(PROGRESS_WIDTH * progress)
    bar = "".join(
        "=" if i < filled else ">" if i == filled else " "
        for i in range(PROGRESS_WIDTH)
    )
    return f"\033[1m[{bar}] {int(progress * 100.0)}%\r\033[0m"


def _default_algorithm(points: list[Point]) -> float:
    return divide_and_conquer_squared(points)


def _write_rows(
    config: BenchmarkConfig,
    algorithm: Algorithm,
    rng: random.Random,
    stream: TextIO,
    progress: Progress | None,
) -> list[Row]:
    rows: list[Row] = []
    executed = 0
    total = config.total_runs
    stream.write(CSV_HEADER + "\n")
    for n in config.sizes:
        times: list[float] = []
        for _ in range(config.runs):
            executed += 1
            if progress is not None:
                progress(executed, total)
            points = random_points(n, rng)
            start = time.perf_counter_ns()
            algorithm(points)
            times.append(float(time.perf_counter_ns() - start))
        mean, stdev = mean_stdev(times)
        row: Row = (n, mean, stdev, *quartiles(times))
        rows.append(row)
        stream.write(",".join([str(n), *(f"{value:g}" for value in row[1:])]) + "\n")
    return rows


def run_benchmark(
    config: BenchmarkConfig,
    algorithm: Algorithm | None = None,
    rng: random.Random | None = None,
    stream: TextIO | None = None,
    progress: Progress | None = None,
) -> list[Row]:
    """Time ``algorithm`` on random point sets and write a CSV summary.

    Each row holds the point count, the mean and standard deviation of the
    run times in nanoseconds, and their five-number summary. The CSV goes to
    ``stream`` if given, otherwise to ``config.output``. The rows are returned.
    """
    algorithm = algorithm or _default_algorithm
    rng = rng or random.Random()
    if stream is not None:
        return _write_rows(config, algorithm, rng, stream, progress)
    with open(config.output, "w", encoding="utf-8", newline="") as handle:
        return _write_rows(config, algorithm, rng, handle, progress)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark from the command line; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_args(args)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    def show(done: int, total: int) -> None:
        sys.stderr.write(render_progress(done, total))
        sys.stderr.flush()

    sys.stderr.write("\033[0;36mRunning tests...\033[0m\n\n")
    run_benchmark(config, progress=show)
    sys.stderr.write("\n\n\033[1;32mDone!\033[0m\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
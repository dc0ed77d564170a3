import io
import random
from pathlib import Path

import pytest

from closestpair.cli import (
    BenchmarkConfig,
    UsageError,
    main,
    parse_args,
    render_progress,
    run_benchmark,
)

HEADER = "n,t_mean,t_stdev,t_Q0,t_Q1,t_Q2,t_Q3,t_Q4"


def test_parse_args_valid():
    config = parse_args(["out.csv", "32", "10", "100", "10"])
    assert config.output == Path("out.csv")
    assert (config.runs, config.lower, config.upper, config.step) == (32, 10, 100, 10)


def test_parse_args_sizes_and_total():
    config = parse_args(["out.csv", "4", "2", "8", "3"])
    assert list(config.sizes) == [2, 5, 8]
    assert config.total_runs == 4 * 3


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["out.csv", "32", "10", "100"],
        ["out.csv", "32", "10", "100", "10", "extra"],
    ],
)
def test_parse_args_wrong_count(argv):
    with pytest.raises(UsageError, match="Usage"):
        parse_args(argv)


def test_parse_args_not_a_number():
    with pytest.raises(UsageError):
        parse_args(["out.csv", "abc", "10", "100", "10"])


def test_parse_args_out_of_int64_range():
    with pytest.raises(UsageError):
        parse_args(["out.csv", str(2**64), "10", "100", "10"])


def test_too_few_runs():
    with pytest.raises(UsageError, match="at least 4"):
        parse_args(["out.csv", "3", "10", "100", "10"])


@pytest.mark.parametrize(
    "numbers", [("4", "0", "10", "1"), ("4", "1", "-5", "1"), ("4", "1", "10", "0")]
)
def test_non_positive_range(numbers):
    with pytest.raises(UsageError, match="positive"):
        parse_args(["out.csv", *numbers])


def test_lower_above_upper():
    with pytest.raises(UsageError, match="at most equal"):
        BenchmarkConfig(Path("out.csv"), 4, 20, 10, 1)


def test_render_progress_start():
    bar = render_progress(0, 10)
    assert bar.startswith("\033[1m[>")
    assert bar.endswith("] 0%\r\033[0m")


def test_render_progress_complete():
    bar = render_progress(10, 10)
    assert bar == "\033[1m[" + "=" * 70 + "] 100%\r\033[0m"


@pytest.mark.parametrize("done", [1, 3, 5, 7, 9])
def test_render_progress_bar_width(done):
    bar = render_progress(done, 10)
    inner = bar[len("\033[1m["):bar.index("]")]
    assert len(inner) == 70
    assert inner.count(">") == 1
    assert inner.rstrip(" ").rstrip(">") == "=" * inner.count("=")


def _parse_csv(text):
    lines = text.strip().splitlines()
    return lines[0], [[float(v) for v in line.split(",")] for line in lines[1:]]


def test_run_benchmark_writes_rows_and_reports_progress():
    config = BenchmarkConfig(Path("unused.csv"), 4, 2, 6, 2)
    seen_sizes = []
    calls = []
    stream = io.StringIO()
    rows = run_benchmark(
        config,
        algorithm=lambda pts: seen_sizes.append(len(pts)),
        rng=random.Random(1),
        stream=stream,
        progress=lambda done, total: calls.append((done, total)),
    )
    header, parsed = _parse_csv(stream.getvalue())
    assert header == HEADER
    assert [row[0] for row in rows] == [2, 4, 6]
    assert [int(row[0]) for row in parsed] == [2, 4, 6]
    assert seen_sizes == [2] * 4 + [4] * 4 + [6] * 4
    assert calls == [(i, 12) for i in range(1, 13)]


def test_run_benchmark_summary_is_ordered():
    config = BenchmarkConfig(Path("unused.csv"), 5, 3, 3, 1)
    rows = run_benchmark(config, rng=random.Random(7), stream=io.StringIO())
    (n, mean, stdev, q0, q1, q2, q3, q4), = rows
    assert n == 3
    assert q0 <= q1 <= q2 <= q3 <= q4
    assert q0 <= mean <= q4
    assert stdev >= 0


def test_run_benchmark_propagates_algorithm_error():
    config = BenchmarkConfig(Path("unused.csv"), 4, 2, 2, 1)

    def failing(points):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        run_benchmark(config, algorithm=failing, stream=io.StringIO())


def test_run_benchmark_writes_to_output_file(tmp_path):
    target = tmp_path / "times.csv"
    config = BenchmarkConfig(target, 4, 2, 3, 1)
    rows = run_benchmark(config, rng=random.Random(3))
    header, parsed = _parse_csv(target.read_text())
    assert header == HEADER
    assert len(parsed) == len(rows) == 2


def test_main_success(tmp_path, capsys):
    target = tmp_path / "out.csv"
    status = main([str(target), "4", "2", "6", "2"])
    assert status == 0
    header, parsed = _parse_csv(target.read_text())
    assert header == HEADER
    assert [int(row[0]) for row in parsed] == [2, 4, 6]
    err = capsys.readouterr().err
    assert "Running tests..." in err
    assert "Done!" in err


def test_main_bad_arguments(tmp_path, capsys):
    status = main([str(tmp_path / "out.csv"), "2", "1", "10", "1"])
    assert status == 1
    assert "<RUNS> must be at least 4." in capsys.readouterr().err
    assert not (tmp_path / "out.csv").exists()


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage: <filename> <RUNS> <LOWER> <UPPER> <STEP>" in capsys.readouterr().err
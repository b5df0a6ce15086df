#!/usr/bin/env python3
"""
In-process benchmark of the Python Day 3 strategies.

Each group (Day 3 Part 1, Day 3 Part 2) runs every applicable strategy
over the same grid: a few warm-up calls, then timed calls, summarized
with the same statistics the rest of the tooling uses.
"""
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from tabulate import tabulate

from agent_bench.cli.cli import build_env_parser
from agent_bench.config.config_loader import ConfigLoader, DEFAULT_CONFIG_PATH
from agent_bench.service.task_executor.task_execute_result import StatSummary
from agent_bench.solutions import day03
from agent_bench.util.cal_utils import calculate_stat_summary, relative_to_fastest
from agent_bench.util.inputs import parse_to_number_grid, read_number_grid
from agent_bench.util.log_config import setup_logger

logger = setup_logger(__name__)

DEFAULT_WARMUP = 3
DEFAULT_REPEAT = 20


def benchmark_callable(fn: Callable[[], object], warmup: int = DEFAULT_WARMUP,
                       repeat: int = DEFAULT_REPEAT) -> StatSummary:
    """Time ``fn()`` ``repeat`` times after ``warmup`` untimed calls (seconds)."""
    if repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {repeat}")
    for _ in range(warmup):
        fn()
    timings = []
    for _ in range(repeat):
        start = time.perf_counter()
        fn()
        timings.append(time.perf_counter() - start)
    return calculate_stat_summary(timings)


def run_group(name: str, grid, n: int, strategies: Dict[str, Callable],
              warmup: int = DEFAULT_WARMUP, repeat: int = DEFAULT_REPEAT) -> List[dict]:
    """
    Benchmark every strategy of one group.

    Raises:
        RuntimeError: if strategies return different answers.
    """
    answers = {label: sum(fn(row, n) for row in grid) for label, fn in strategies.items()}
    if len(set(answers.values())) > 1:
        detail = ", ".join(f"{label}={value}" for label, value in answers.items())
        raise RuntimeError(f"{name}: strategies disagree ({detail})")

    logger.info(f"{name}: {len(strategies)} strategies, {warmup} warm-up + {repeat} timed runs")
    rows = []
    for label, fn in strategies.items():
        summary = benchmark_callable(lambda: sum(fn(row, n) for row in grid), warmup, repeat)
        rows.append({"group": name, "strategy": label, "answer": answers[label], "summary": summary})

    for row, relative in zip(rows, relative_to_fastest([r["summary"].avg for r in rows])):
        row["relative"] = relative
    return sorted(rows, key=lambda r: r["summary"].avg)


def format_rows(rows: List[dict]) -> str:
    table = [
        [
            r["group"],
            r["strategy"],
            r["answer"],
            f"{r['summary'].avg * 1000:.3f}",
            f"{r['summary'].stddev * 1000:.3f}",
            f"{r['summary'].p50 * 1000:.3f}",
            f"{r['summary'].p95 * 1000:.3f}",
            f"{r['relative']:.2f}",
        ]
        for r in rows
    ]
    headers = ["group", "strategy", "answer", "mean (ms)", "± (ms)", "p50 (ms)", "p95 (ms)", "relative"]
    return tabulate(table, headers=headers, tablefmt="github", stralign="left", numalign="right")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_env_parser("Benchmark the Python Day 3 strategies in-process")
    parser.add_argument("--input", type=Path, default=None,
                        help="Input file (default: <input_dir>/03.txt)")
    parser.add_argument("--warmup", type=int, default=DEFAULT_WARMUP)
    parser.add_argument("--repeat", type=int, default=DEFAULT_REPEAT)
    args = parser.parse_args(argv)

    try:
        config = ConfigLoader(args.config_dir or DEFAULT_CONFIG_PATH, env=args.env)
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        if args.input:
            grid = parse_to_number_grid(args.input.read_text(encoding="utf-8"))
        else:
            grid = read_number_grid(day03.DAY, Path(config.config_data.input_dir))
    except FileNotFoundError as e:
        logger.error(f"Input not found: {e.filename or e}")
        return 1

    rows = []
    try:
        rows += run_group("Day 3 Part 1", grid, day03.PART1_DIGITS,
                          day03.strategies_for(day03.PART1_DIGITS), args.warmup, args.repeat)
        rows += run_group("Day 3 Part 2", grid, day03.PART2_DIGITS,
                          day03.strategies_for(day03.PART2_DIGITS), args.warmup, args.repeat)
    except (RuntimeError, ValueError) as e:
        logger.error(str(e))
        return 1

    print(format_rows(rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())

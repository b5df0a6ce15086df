#!/usr/bin/env python3
"""
Answer validation across agent binaries.

Runs every configured binary once, captures the ``Part 1: <n>`` /
``Part 2: <n>`` lines it prints, and checks that all agents agree. Each
run is sampled with psutil so the table also shows wall time, CPU and
peak memory.
"""
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from tabulate import tabulate

from agent_bench.cli.cli import add_override_arguments, build_env_parser, collect_overrides
from agent_bench.config.config_loader import ConfigLoader, DEFAULT_CONFIG_PATH
from agent_bench.models.experiment_params import BenchmarkTarget
from agent_bench.service.monitor.process_monitor import monitor_subprocess
from agent_bench.service.monitor.process_monitor_result import ProcessMonitorResult
from agent_bench.service.runner.binary_runner import BinaryRunner
from agent_bench.util.file_utils import clean_path
from agent_bench.util.log_config import setup_logger

logger = setup_logger(__name__)

ANSWER_PATTERN = re.compile(r"^\s*Part\s+([12])\s*:\s*(-?\d+)\s*$", re.MULTILINE)


@dataclass
class AnswerResult:
    agent: str
    part: str
    returncode: int
    answers: Dict[str, int] = field(default_factory=dict)
    stderr: str = ""
    monitor: Optional[ProcessMonitorResult] = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def parse_answers(stdout: str) -> Dict[str, int]:
    """``"Part 1: 357"`` -> ``{"part1": 357}``; later lines win."""
    return {f"part{num}": int(value) for num, value in ANSWER_PATTERN.findall(stdout)}


def run_target(target: BenchmarkTarget, results_dir: Path, interval: float = 0.01) -> AnswerResult:
    """
    Run one binary to completion under the process monitor.

    Raises:
        FileNotFoundError: if the binary does not exist.
    """
    part = target.part.value if target.part else "all"
    runner = BinaryRunner(
        binary=target.binary,
        args=[target.part.value] if target.part else [],
        results_dir=results_dir / f"{target.agent.value}_{part}",
    )
    process = runner.run_subprocess()
    monitor = monitor_subprocess(process, interval=interval)
    return AnswerResult(
        agent=target.agent.value,
        part=part,
        returncode=process.returncode,
        answers=parse_answers(runner.read_stdout()),
        stderr=runner.read_stderr().strip(),
        monitor=monitor,
    )


def compare_answers(results: List[AnswerResult]) -> List[str]:
    """
    Describe every part on which successful runs disagree.

    Returns:
        List[str]: one line per disagreeing part; empty when all agree.
    """
    by_part: Dict[str, Dict[str, int]] = {}
    for result in results:
        if not result.ok:
            continue
        for part, value in result.answers.items():
            by_part.setdefault(part, {})[result.agent] = value

    mismatches = []
    for part in sorted(by_part):
        values = by_part[part]
        if len(set(values.values())) > 1:
            detail = ", ".join(f"{agent}={value}" for agent, value in values.items())
            mismatches.append(f"{part}: {detail}")
    return mismatches


def format_results_table(results: List[AnswerResult]) -> str:
    headers = ["agent", "args", "status", "part1", "part2", "time (s)", "cpu peak %", "rss peak (MB)"]
    rows = []
    for r in results:
        m = r.monitor
        rows.append([
            r.agent,
            r.part,
            "ok" if r.ok else f"exit {r.returncode}",
            r.answers.get("part1", "-"),
            r.answers.get("part2", "-"),
            f"{m.execution_time:.3f}" if m else "-",
            f"{m.peak_cpu_percent:.1f}" if m else "-",
            f"{m.peak_rss_mb:.1f}" if m else "-",
        ])
    return tabulate(rows, headers=headers, tablefmt="github", stralign="left", numalign="left")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_env_parser("Validate that agent binaries agree on their answers")
    add_override_arguments(parser)
    args = parser.parse_args(argv)

    try:
        config = ConfigLoader(args.config_dir or DEFAULT_CONFIG_PATH, env=args.env,
                              overrides=collect_overrides(args))
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    results_dir = Path(config.config_data.cwd) / "validation"
    if results_dir.is_dir():
        clean_path(results_dir)
    targets = [t for exp in config.get_experiments() for t in exp.targets]
    logger.info(f"Validating {len(targets)} run(s) for day {config.config_data.day}")

    results = []
    for idx, target in enumerate(targets, 1):
        logger.info(f"  [{idx}/{len(targets)}] {target.command}")
        try:
            result = run_target(target, results_dir)
        except FileNotFoundError as e:
            logger.error(str(e))
            return 1
        if not result.ok:
            logger.error(f"{target.command} exited with status {result.returncode}")
            if result.stderr:
                logger.error(result.stderr)
        results.append(result)

    print(format_results_table(results))

    failed = [r for r in results if not r.ok]
    mismatches = compare_answers(results)
    for line in mismatches:
        logger.error(f"Answers differ on {line}")

    if failed or mismatches:
        logger.error(f"{len(failed)} failed run(s), {len(mismatches)} disagreeing part(s)")
        return 1
    logger.info("✓ All agents agree")
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Benchmark runner for agent-authored Advent of Code solutions.

Builds the agent-named binaries for a day, benchmarks them with hyperfine
and prints the exported markdown report. With no flags it runs the
combined benchmark for the day in config_yaml/config.yaml; ``--env split``
(or ``--split``) benchmarks part1 and part2 separately.
"""
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from agent_bench.cli.cli import add_override_arguments, build_env_parser, collect_overrides
from agent_bench.config.config_loader import ConfigLoader, DEFAULT_CONFIG_PATH
from agent_bench.service.task_executor.task_executor import TaskExecutor
from agent_bench.util.file_utils import ToolNotFoundError
from agent_bench.util.log_config import attach_log_file, setup_logger

logger = setup_logger(__name__)


def build_parser():
    parser = build_env_parser("Build and benchmark agent solutions with hyperfine")
    add_override_arguments(parser)
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Also write detailed logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for a benchmark run.

    Returns:
        int: process exit status (0 on success)
    """
    args = build_parser().parse_args(argv)
    if args.log_file:
        attach_log_file(args.log_file)

    try:
        config = ConfigLoader(args.config_dir or DEFAULT_CONFIG_PATH, env=args.env,
                              overrides=collect_overrides(args))
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if args.env:
        logger.info(f"Loaded configuration with environment override: {args.env}")
    experiments = config.get_experiments()
    logger.info(f"Day {config.config_data.day}: {len(experiments)} benchmark group(s), "
                f"agents: {', '.join(a.value for a in config.config_data.agents)}")

    executor = TaskExecutor(config.config_data, experiments)
    try:
        results = executor.execute()
    except ToolNotFoundError as e:
        print(e.hint)
        return 1
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except subprocess.CalledProcessError as e:
        logger.error(f"Command failed with exit status {e.returncode}: {_format_cmd(e.cmd)}")
        return e.returncode or 1

    logger.info(f"✓ {len(results)} report(s): {', '.join(str(r.markdown_path) for r in results)}")
    return 0


def _format_cmd(cmd) -> str:
    if isinstance(cmd, (list, tuple)):
        return " ".join(str(c) for c in cmd)
    return str(cmd)


if __name__ == "__main__":
    sys.exit(main())

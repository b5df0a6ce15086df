#!/usr/bin/env python3
"""
Shared helpers for command-line interfaces used across the benchmark scripts.
"""
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional


def build_env_parser(description: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Create an ArgumentParser with the common --env and --config-dir options.

    Args:
        description: Optional parser description shown in CLI help.

    Returns:
        argparse.ArgumentParser: parser preconfigured with the --env argument.
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'split'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding config.yaml (default: the bundled config_yaml/).",
    )
    return parser


def add_override_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Options that override individual config.yaml values."""
    parser.add_argument("--day", type=str, default=None,
                        help="Puzzle day, e.g. 03")
    parser.add_argument("--agents", type=_comma_list, default=None,
                        help="Comma-separated agents, e.g. claude,cursor")
    parser.add_argument("--split", action="store_const", const=True, default=None,
                        help="Benchmark part1 and part2 separately")
    parser.add_argument("--skip-build", dest="build", action="store_const", const=False, default=None,
                        help="Do not run cargo before benchmarking")
    parser.add_argument("--warmup", type=int, default=None,
                        help="hyperfine warmup runs (default from config: 3)")
    parser.add_argument("--output-dir", dest="output_cwd", type=str, default=None,
                        help="Directory receiving the markdown/JSON reports")
    parser.add_argument("--binary-dir", type=str, default=None,
                        help="Directory containing the compiled binaries")
    return parser


def collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Config overrides set on the command line; unset options are left out."""
    keys = ("day", "agents", "split", "build", "warmup", "output_cwd", "binary_dir")
    return {key: getattr(args, key) for key in keys if getattr(args, key, None) is not None}


def _comma_list(value: str) -> List[str]:
    items = [item.strip() for item in value.split(",") if item.strip()]
    if not items:
        raise argparse.ArgumentTypeError("expected at least one comma-separated value")
    return items

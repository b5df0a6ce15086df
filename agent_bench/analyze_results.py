#!/usr/bin/env python3
"""
Benchmark results analysis tool.

Reads the hyperfine JSON exports written next to the markdown reports and
produces a comparison table (console + CSV) and a mean-time bar chart per
benchmark group.
"""
import json
import sys
from pathlib import Path
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib import colors as mcolors
import numpy as np
import pandas as pd
from tabulate import tabulate

from agent_bench.cli.cli import add_override_arguments, build_env_parser, collect_overrides
from agent_bench.config.config_loader import ConfigLoader, DEFAULT_CONFIG_PATH
from agent_bench.consts.AgentType import AgentType
from agent_bench.models.benchmark_result import BenchmarkReport
from agent_bench.models.plot_params import PlotParams
from agent_bench.util.cal_utils import relative_to_fastest
from agent_bench.util.log_config import setup_logger

logger = setup_logger(__name__)

# Deterministic color per agent so charts of different days line up
AGENT_BASE_COLORS = {
    AgentType.ANTIGRAVITY.value: '#1f77b4',
    AgentType.CLAUDE.value: '#ff7f0e',
    AgentType.CURSOR.value: '#2ca02c',
    AgentType.GEMINI_CLI.value: '#d62728',
    AgentType.GEMINI_CLI_3.value: '#9467bd',
    AgentType.CODEX.value: '#8c564b',
    AgentType.BASE.value: '#7f7f7f',
}

FRAME_COLUMNS = ["group", "agent", "part", "command", "mean", "stddev", "median",
                 "min", "max", "user", "system", "runs", "failed_runs", "relative"]


def get_colors_for_labels(labels: List[str]) -> List[str]:
    """Agent colors for known agents, the tableau cycle for anything else."""
    fallback = list(mcolors.TABLEAU_COLORS.values())
    colors = []
    fallback_idx = 0
    for label in labels:
        color = AGENT_BASE_COLORS.get(label)
        if color is None:
            color = mcolors.to_hex(fallback[fallback_idx % len(fallback)])
            fallback_idx += 1
        colors.append(color)
    return colors


def load_reports(paths: List[Path]) -> List[BenchmarkReport]:
    """
    Load hyperfine JSON exports.

    Raises:
        FileNotFoundError: if a file does not exist
        ValueError: if a file is not valid hyperfine JSON
    """
    reports = []
    for path in paths:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Benchmark export not found: {path}")
        try:
            reports.append(BenchmarkReport.load_from_file(path))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in benchmark export {path}: {e}") from e
    return reports


def results_frame(reports: List[BenchmarkReport], day: Optional[str] = None) -> pd.DataFrame:
    """
    One row per benchmarked command, sorted by group then mean time.

    ``relative`` is the mean divided by the fastest mean of the same group.
    """
    records = []
    for report in reports:
        means = [r.mean for r in report.results]
        for result, relative in zip(report.results, relative_to_fastest(means)):
            records.append({
                "group": report.group_name,
                "agent": result.agent(day),
                "part": result.part,
                "command": result.command,
                "mean": result.mean,
                "stddev": result.stddev if result.stddev is not None else np.nan,
                "median": result.median,
                "min": result.min,
                "max": result.max,
                "user": result.user,
                "system": result.system,
                "runs": result.runs,
                "failed_runs": result.failed_runs,
                "relative": relative,
            })
    frame = pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)
    if frame.empty:
        return frame
    return frame.sort_values(["group", "mean"], kind="stable").reset_index(drop=True)


def format_frame(frame: pd.DataFrame) -> str:
    """Milliseconds table in github markdown for the console."""
    rows = []
    for row in frame.itertuples(index=False):
        stddev = "-" if pd.isna(row.stddev) else f"{row.stddev * 1000:.2f}"
        rows.append([
            row.group,
            row.agent,
            row.part,
            f"{row.mean * 1000:.2f}",
            stddev,
            f"{row.min * 1000:.2f}",
            f"{row.max * 1000:.2f}",
            row.runs,
            f"{row.relative:.2f}",
        ])
    headers = ["group", "agent", "part", "mean (ms)", "± (ms)", "min (ms)", "max (ms)", "runs", "relative"]
    return tabulate(rows, headers=headers, tablefmt="github", stralign="left", numalign="right")


def plot_bar_chart(params: PlotParams) -> None:

    x = np.arange(len(params.values))
    fig, ax = plt.subplots(figsize=params.figsize)

    ax.bar(x, params.values, yerr=params.errors, color=params.colors or None, linewidth=1, capsize=4)

    ax.set_ylabel(params.ylabel)
    ax.set_title(params.title)
    ax.set_xticks(x)
    ax.set_xticklabels(params.labels, rotation=params.rotation, ha="right")

    ax.grid(True, alpha=0.3, axis="y")

    if params.annotate and params.values:
        top = max(params.values)
        for i, v in enumerate(params.values):
            ax.text(i, v + top * 0.01, f"{v:.2f}", ha="center", va="bottom", fontsize=9)

    plt.tight_layout()

    output_path = Path(params.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(output_path, dpi=160)
    logger.info(f"✓ Saved: {output_path}")
    plt.close(fig)


def plot_group(frame: pd.DataFrame, group: str, output_dir: Path) -> Path:
    subset = frame[frame["group"] == group]
    labels = subset["agent"].tolist()
    errors = (subset["stddev"].fillna(0.0) * 1000).tolist()
    output_path = output_dir / f"{group}_mean_time.png"
    plot_bar_chart(PlotParams(
        values=(subset["mean"] * 1000).tolist(),
        labels=labels,
        errors=errors,
        colors=get_colors_for_labels(labels),
        ylabel="Mean time (ms)",
        title=f"{group}: mean wall time (hyperfine)",
        output_path=str(output_path),
    ))
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_env_parser("Summarize hyperfine exports of agent benchmarks")
    add_override_arguments(parser)
    parser.add_argument("files", nargs="*", type=Path,
                        help="hyperfine JSON exports (default: the ones named by the config)")
    parser.add_argument("--no-plot", action="store_true", help="Skip the bar charts")
    args = parser.parse_args(argv)

    try:
        config = ConfigLoader(args.config_dir or DEFAULT_CONFIG_PATH, env=args.env,
                              overrides=collect_overrides(args))
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    paths = args.files or [exp.json_path for exp in config.get_experiments() if exp.json_path]
    if not paths:
        logger.error("No JSON exports to analyze (export_json is disabled and no files were given)")
        return 1

    try:
        reports = load_reports(paths)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    frame = results_frame(reports, config.config_data.day)
    if frame.empty:
        logger.error("The exports contain no results")
        return 1

    for row in frame[frame["failed_runs"] > 0].itertuples(index=False):
        logger.warning(f"{row.command}: {row.failed_runs} of {row.runs} run(s) exited non-zero")

    print(format_frame(frame))

    output_dir = Path(config.config_data.cwd)
    csv_path = output_dir / f"day{config.config_data.day}_summary.csv"
    output_dir.mkdir(parents=True, exist_ok=True)
    frame.to_csv(csv_path, index=False)
    logger.info(f"✓ Summary exported to: {csv_path}")

    if not args.no_plot:
        for group in frame["group"].unique():
            plot_group(frame, group, output_dir)

    return 0


if __name__ == "__main__":
    sys.exit(main())

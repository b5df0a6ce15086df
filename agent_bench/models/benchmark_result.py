"""Benchmark result data models (hyperfine JSON export)."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import re

PART_PATTERN = re.compile(r"\b(part[12])\b")


@dataclass
class HyperfineResult:
    """
    Timing statistics hyperfine reports for one command.

    All times are in seconds.
    """
    command: str
    mean: float
    stddev: Optional[float]
    median: float
    user: float
    system: float
    min: float
    max: float
    times: List[float] = field(default_factory=list)
    exit_codes: List[int] = field(default_factory=list)

    @property
    def runs(self) -> int:
        return len(self.times)

    @property
    def failed_runs(self) -> int:
        """Runs hyperfine recorded with a non-zero exit code."""
        return sum(1 for code in self.exit_codes if code != 0)

    def agent(self, day: Optional[str] = None) -> str:
        return agent_label(self.command, day)

    @property
    def part(self) -> str:
        return part_label(self.command)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HyperfineResult':
        """Create HyperfineResult from a hyperfine ``results`` entry."""
        return cls(
            command=data["command"],
            mean=float(data["mean"]),
            # hyperfine writes null stddev when only one run was made
            stddev=None if data.get("stddev") is None else float(data["stddev"]),
            median=float(data.get("median", data["mean"])),
            user=float(data.get("user", 0.0)),
            system=float(data.get("system", 0.0)),
            min=float(data.get("min", data["mean"])),
            max=float(data.get("max", data["mean"])),
            times=[float(t) for t in data.get("times", [])],
            exit_codes=[int(c) for c in (data.get("exit_codes") or []) if c is not None],
        )


@dataclass
class BenchmarkReport:
    """
    All results of one hyperfine invocation, i.e. one benchmark group.
    """
    group_name: str
    results: List[HyperfineResult]
    source: Optional[Path] = None

    @property
    def fastest(self) -> Optional[HyperfineResult]:
        if not self.results:
            return None
        return min(self.results, key=lambda r: r.mean)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], group_name: str = "") -> 'BenchmarkReport':
        if "results" not in data:
            raise ValueError("Not a hyperfine export: missing 'results'")
        results = [HyperfineResult.from_dict(r) for r in data["results"]]
        return cls(group_name=group_name, results=results)

    @classmethod
    def load_from_file(cls, file_path: Path) -> 'BenchmarkReport':
        """Load a hyperfine ``--export-json`` file."""
        path = Path(file_path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        group_name = path.stem
        if group_name.endswith("_benchmark"):
            group_name = group_name[: -len("_benchmark")]
        report = cls.from_dict(data, group_name=group_name)
        report.source = path
        return report


def agent_label(command: str, day: Optional[str] = None) -> str:
    """
    Extract the agent name from a benchmarked command.

    ``target/release/gemini_cli_day03 part1`` -> ``gemini_cli``
    """
    binary = command.split()[0] if command.strip() else command
    name = Path(binary).name
    suffix = re.compile(rf"_day{day}$") if day else re.compile(r"_day\d+$")
    return suffix.sub("", name)


def part_label(command: str) -> str:
    """Return ``part1``/``part2`` when the command selects a part, else ``all``."""
    match = PART_PATTERN.search(" ".join(command.split()[1:]))
    return match.group(1) if match else "all"

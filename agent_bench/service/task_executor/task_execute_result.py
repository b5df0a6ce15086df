import dataclasses
from pathlib import Path
from typing import Optional


@dataclasses.dataclass
class StatSummary:
    """Statistical summary of a list of numeric values"""
    raw_data: list[float]
    min: float
    max: float
    p50: float
    p95: float
    p99: float
    avg: float
    stddev: float = 0.0


@dataclasses.dataclass
class TaskExecuteResult:
    """Outcome of one benchmark group (one hyperfine invocation)."""
    group_name: str
    label: str
    markdown_path: Path
    json_path: Optional[Path]
    report: str

"""Models for benchmark data structures."""

from .benchmark_result import BenchmarkReport, HyperfineResult, agent_label, part_label
from .experiment_params import BenchmarkTarget, ExperimentParams
from .plot_params import PlotParams

__all__ = [
    "BenchmarkReport",
    "HyperfineResult",
    "agent_label",
    "part_label",
    "BenchmarkTarget",
    "ExperimentParams",
    "PlotParams",
]

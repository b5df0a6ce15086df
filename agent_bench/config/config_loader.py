"""
Configuration manager for agent benchmark runs.

This module provides the ConfigLoader class for loading and validating
benchmark configuration from YAML files.
"""
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from agent_bench.config.benchmark_config import BenchmarkConfig
from agent_bench.consts.AgentType import AgentType
from agent_bench.consts.Part import Part
from agent_bench.models.experiment_params import BenchmarkTarget, ExperimentParams
from agent_bench.util.inputs import INPUT_DIR_ENV

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config_yaml"
REQUIRED_KEYS = ("day", "agents", "binary_dir", "output_cwd")


class ConfigLoader:

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH, env: Optional[str] = None,
                 overrides: Optional[Dict[str, Any]] = None):
        self.config_path = Path(config_path)
        self.env = env
        self.overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        self.config_data = self._load_config()
        self.experiments = None

    def _load_config(self) -> BenchmarkConfig:
        """
        Load and parse benchmark configuration from YAML file.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            BenchmarkConfig: Configured benchmark configuration instance
        """
        base_config_file = self.config_path / "config.yaml"
        with open(base_config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if self.env:
            env_config_file = self.config_path / f"config_{self.env}.yaml"
            with open(env_config_file, "r", encoding="utf-8") as f:
                env_data = yaml.safe_load(f) or {}
                # top-level keys from the env file replace the base ones
                data.update(env_data)

        data.update(self.overrides)

        for key in REQUIRED_KEYS:
            if key not in data:
                raise KeyError(f"Missing required config key: {key}")

        config = BenchmarkConfig()

        config.day = _normalize_day(data["day"])
        config.agents = [_parse_enum(AgentType, agent, "agent") for agent in data["agents"]]
        if not config.agents:
            raise ValueError("At least one agent must be configured")
        config.parts = [_parse_enum(Part, part, "part") for part in data.get("parts", ["part1", "part2"])]

        config.split = bool(data.get("split", False))
        config.build = bool(data.get("build", True))
        config.warmup = int(data.get("warmup", 3))
        if config.warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {config.warmup}")
        config.no_shell = bool(data.get("no_shell", True))
        config.export_json = bool(data.get("export_json", True))

        config.binary_dir = str(data["binary_dir"])
        config.cwd = str(data["output_cwd"])
        config.input_dir = os.environ.get(INPUT_DIR_ENV) or str(data.get("input_dir", "input"))

        config.cargo_cmd = data.get("cargo_cmd", "cargo")
        config.cargo_args = list(data.get("cargo_args", ["build", "--release"]))
        config.hyperfine_cmd = data.get("hyperfine_cmd", "hyperfine")

        return config

    def binary_path(self, agent: AgentType) -> Path:
        return Path(self.config_data.binary_dir) / agent.binary_name(self.config_data.day)

    def get_experiments(self) -> List[ExperimentParams]:
        """
        Generate the benchmark groups for the configured mode.

        Combined mode yields one group running every agent binary without
        arguments; split mode yields one group per part, passing the part
        name to every binary.

        Returns:
            List[ExperimentParams]: benchmark groups in execution order
        """
        if self.experiments is not None:
            return self.experiments

        cfg = self.config_data
        out_dir = Path(cfg.cwd)
        experiments = []

        if cfg.split:
            for part in cfg.parts:
                group_name = f"day{cfg.day}_{part.value}"
                targets = [BenchmarkTarget(agent, self.binary_path(agent), part) for agent in cfg.agents]
                experiments.append(self._make_experiment(group_name, f"{part.title} ", targets, out_dir, part))
        else:
            group_name = f"day{cfg.day}"
            targets = [BenchmarkTarget(agent, self.binary_path(agent)) for agent in cfg.agents]
            experiments.append(self._make_experiment(group_name, "", targets, out_dir, None))

        self.experiments = experiments
        return experiments

    def _make_experiment(self, group_name: str, label: str, targets: List[BenchmarkTarget],
                         out_dir: Path, part: Optional[Part]) -> ExperimentParams:
        cfg = self.config_data
        return ExperimentParams(
            group_name=group_name,
            label=label,
            targets=targets,
            markdown_path=out_dir / f"{group_name}_benchmark.md",
            json_path=(out_dir / f"{group_name}_benchmark.json") if cfg.export_json else None,
            warmup=cfg.warmup,
            no_shell=cfg.no_shell,
            hyperfine_cmd=cfg.hyperfine_cmd,
            part=part,
        )


def _normalize_day(value) -> str:
    """Accept 3, "3" or "03" and return the zero-padded form used in binary names."""
    text = str(value).strip()
    if not text.isdigit() or not 1 <= int(text) <= 25:
        raise ValueError(f"Invalid day: {value!r} (expected 1-25)")
    return f"{int(text):02d}"


def _parse_enum(enum_cls, value, kind: str):
    try:
        return enum_cls(str(value))
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Unknown {kind} '{value}'. Valid values: {valid}") from None

"""Shared fixtures: fake cargo/hyperfine so no external tools are needed."""
import json
import subprocess
from pathlib import Path

import pytest

from agent_bench.consts.AgentType import AgentType

DEFAULT_AGENTS = [AgentType.ANTIGRAVITY, AgentType.CLAUDE, AgentType.CURSOR, AgentType.GEMINI_CLI]

EXAMPLE_GRID_TEXT = "987654321111111\n811111111111119\n234234234234278\n818181911112111\n"


def hyperfine_json(commands, mean=0.0012):
    return {
        "results": [
            {
                "command": cmd,
                "mean": mean * (i + 1),
                "stddev": mean * 0.1,
                "median": mean * (i + 1),
                "user": mean * 0.5,
                "system": mean * 0.2,
                "min": mean * (i + 1) * 0.9,
                "max": mean * (i + 1) * 1.2,
                "times": [mean * (i + 1)] * 5,
                "exit_codes": [0] * 5,
            }
            for i, cmd in enumerate(commands)
        ]
    }


class FakeTools:
    """Records subprocess.run calls and emulates cargo and hyperfine."""

    def __init__(self):
        self.calls = []
        self.fail_on = None      # "cargo" or "hyperfine"
        self.fail_code = 101
        self.missing = set()     # tool names resolve_cmd should not find

    def resolve(self, cmd):
        if cmd in self.missing:
            raise FileNotFoundError(f"Executable '{cmd}' not found.")
        if "/" in cmd:
            return str(Path(cmd).resolve())
        return f"/usr/bin/{cmd}"

    def run(self, args, cwd=None, check=False, text=False, **kwargs):
        args = list(args)
        self.calls.append(args)
        tool = Path(args[0]).name
        if self.fail_on == tool:
            if check:
                raise subprocess.CalledProcessError(self.fail_code, args)
            return subprocess.CompletedProcess(args, self.fail_code)
        if tool == "hyperfine":
            self._export(args, cwd)
        return subprocess.CompletedProcess(args, 0)

    def _export(self, args, cwd):
        base = Path(cwd) if cwd else Path.cwd()
        commands = [a for a in args[1:] if "_day" in a and not a.endswith((".md", ".json"))]
        if "--export-markdown" in args:
            md = Path(args[args.index("--export-markdown") + 1])
            md = md if md.is_absolute() else base / md
            lines = ["| Command | Mean [ms] |", "|:---|---:|"]
            lines += [f"| `{c}` | {1.2 * (i + 1):.1f} |" for i, c in enumerate(commands)]
            md.write_text("\n".join(lines) + "\n")
        if "--export-json" in args:
            js = Path(args[args.index("--export-json") + 1])
            js = js if js.is_absolute() else base / js
            js.write_text(json.dumps(hyperfine_json(commands)))

    def tool_calls(self, tool):
        return [c for c in self.calls if Path(c[0]).name == tool]


@pytest.fixture
def fake_tools(monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr(subprocess, "run", tools.run)
    monkeypatch.setattr("agent_bench.service.runner.runner.resolve_cmd", tools.resolve)
    monkeypatch.setattr("agent_bench.service.builder.cargo_builder.resolve_cmd", tools.resolve)
    return tools


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """A cargo-like project directory with the default day 03 binaries built."""
    release = tmp_path / "target" / "release"
    release.mkdir(parents=True)
    for agent in DEFAULT_AGENTS:
        binary = release / agent.binary_name("03")
        binary.write_text("#!/bin/sh\n")
        binary.chmod(0o755)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AOC_INPUT_DIR", raising=False)
    return tmp_path


@pytest.fixture
def config_dir(tmp_path):
    """A writable copy of a minimal config.yaml plus an env override."""
    path = tmp_path / "config_yaml"
    path.mkdir()
    (path / "config.yaml").write_text(
        "day: '03'\n"
        "agents: [claude, cursor]\n"
        "parts: [part1, part2]\n"
        "split: false\n"
        "build: true\n"
        "warmup: 3\n"
        "binary_dir: target/release\n"
        "output_cwd: reports\n"
        "input_dir: input\n"
    )
    (path / "config_split.yaml").write_text("split: true\nbuild: false\n")
    return path

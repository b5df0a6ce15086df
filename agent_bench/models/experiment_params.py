from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from agent_bench.consts.AgentType import AgentType
from agent_bench.consts.Part import Part
from agent_bench.util.file_utils import command_path


@dataclass
class BenchmarkTarget:
    """One benchmarked command: an agent binary plus its optional part argument."""
    agent: AgentType
    binary: Path
    part: Optional[Part] = None

    @property
    def command(self) -> str:
        if self.part is None:
            return command_path(self.binary)
        return f"{command_path(self.binary)} {self.part.value}"


@dataclass
class ExperimentParams:
    group_name: str
    label: str
    targets: List[BenchmarkTarget]
    markdown_path: Path
    json_path: Optional[Path]
    warmup: int
    no_shell: bool
    hyperfine_cmd: str
    part: Optional[Part] = None

    @property
    def commands(self) -> List[str]:
        return [t.command for t in self.targets]

    def __str__(self):
        return (f"ExperimentParams(\n"
                f"  group_name={self.group_name},\n"
                f"  label={self.label},\n"
                f"  commands={self.commands},\n"
                f"  markdown_path={self.markdown_path},\n"
                f"  json_path={self.json_path},\n"
                f"  warmup={self.warmup}\n"
                f")")

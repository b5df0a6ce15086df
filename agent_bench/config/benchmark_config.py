from typing import List

from agent_bench.consts.AgentType import AgentType
from agent_bench.consts.Part import Part


class BenchmarkConfig:
    day: str
    agents: List[AgentType]
    parts: List[Part]
    split: bool
    build: bool
    warmup: int
    no_shell: bool
    export_json: bool
    binary_dir: str
    cwd: str
    input_dir: str
    cargo_cmd: str
    cargo_args: List[str]
    hyperfine_cmd: str

    def __repr__(self):
        return (f"BenchmarkConfig(day={self.day!r}, "
                f"agents={[a.value for a in self.agents]}, "
                f"parts={[p.value for p in self.parts]}, "
                f"split={self.split}, build={self.build}, warmup={self.warmup})")

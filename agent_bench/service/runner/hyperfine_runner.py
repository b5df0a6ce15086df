#!/usr/bin/env python3
from pathlib import Path
from typing import List, Optional

from agent_bench.models.experiment_params import ExperimentParams
from agent_bench.util.file_utils import ToolNotFoundError
from .runner import Runner
from agent_bench.util.log_config import setup_logger

logger = setup_logger(__name__)

INSTALL_HINT = (
    "Error: hyperfine is not installed. "
    "Please install it with 'cargo install hyperfine' or your package manager."
)


class HyperfineRunner(Runner):

    def __init__(
        self,
        commands: List[str],
        markdown_path: Path,
        json_path: Optional[Path] = None,
        warmup: int = 3,
        no_shell: bool = True,
        cmd: str = "hyperfine",
        cwd: Optional[Path] = None,
    ):
        super().__init__(cmd, cwd)
        if not commands:
            raise ValueError("hyperfine needs at least one command to benchmark")
        self.commands = list(commands)
        self.markdown_path = self._anchor(Path(markdown_path))
        self.json_path = self._anchor(Path(json_path)) if json_path else None
        self.warmup = warmup
        self.no_shell = no_shell

    def _anchor(self, path: Path) -> Path:
        """Export paths are relative to the directory hyperfine runs in."""
        if self.cwd is not None and not path.is_absolute():
            return Path(self.cwd) / path
        return path

    @classmethod
    def from_experiment(cls, params: ExperimentParams, cwd: Optional[Path] = None) -> "HyperfineRunner":
        return cls(
            commands=params.commands,
            markdown_path=params.markdown_path,
            json_path=params.json_path,
            warmup=params.warmup,
            no_shell=params.no_shell,
            cmd=params.hyperfine_cmd,
            cwd=cwd,
        )

    def check_available(self) -> str:
        """
        Make sure hyperfine can be executed.

        Raises:
            ToolNotFoundError: carrying the install hint when hyperfine is absent.
        """
        try:
            return self.resolve()
        except FileNotFoundError:
            raise ToolNotFoundError(self.cmd, INSTALL_HINT) from None

    def build_args(self) -> List[str]:
        args = [self.check_available()]
        if self.no_shell:
            args.append("-N")
        args += ["--warmup", str(self.warmup)]
        args += ["--export-markdown", str(self.markdown_path)]
        if self.json_path is not None:
            args += ["--export-json", str(self.json_path)]
        args += self.commands
        return args

    def before_run(self) -> None:
        self.markdown_path.parent.mkdir(parents=True, exist_ok=True)
        if self.json_path is not None:
            self.json_path.parent.mkdir(parents=True, exist_ok=True)

    def read_report(self) -> str:
        """Markdown table written by the last run."""
        return self.markdown_path.read_text(encoding="utf-8")

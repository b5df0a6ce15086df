#!/usr/bin/env python3
import subprocess
from pathlib import Path
from typing import List, Optional

from .runner import Runner
from agent_bench.util.file_utils import command_path
from agent_bench.util.log_config import setup_logger

logger = setup_logger(__name__)


class BinaryRunner(Runner):
    """Run a solver binary once, writing its output under results_dir."""

    def __init__(self, binary: Path, args: Optional[List[str]] = None,
                 results_dir: Path = Path("results"), cwd: Optional[Path] = None):
        super().__init__(command_path(binary), cwd)
        self.args = list(args or [])
        self.results_dir = Path(results_dir)
        self.stdout_path = self.results_dir / "stdout.log"
        self.stderr_path = self.results_dir / "stderr.log"

    def build_args(self) -> List[str]:
        return [self.resolve()] + self.args

    def before_run(self) -> None:
        self.results_dir.mkdir(parents=True, exist_ok=True)

    def run_subprocess(self) -> subprocess.Popen:
        """
        Start the solver and return the Popen instance promptly, so a
        monitor can attach to it. Output goes to stdout.log/stderr.log.
        """
        self.before_run()
        args = self.build_args()
        logger.debug(f"Running solver: {' '.join(args)}")
        with open(self.stdout_path, "w") as output_file, \
                open(self.stderr_path, "w") as stderr_file:
            return subprocess.Popen(
                args,
                stdout=output_file,
                stderr=stderr_file,
                cwd=self.cwd,
                text=True,
            )

    def read_stdout(self) -> str:
        return self.stdout_path.read_text(encoding="utf-8") if self.stdout_path.exists() else ""

    def read_stderr(self) -> str:
        return self.stderr_path.read_text(encoding="utf-8") if self.stderr_path.exists() else ""

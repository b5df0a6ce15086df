import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from agent_bench.util.file_utils import resolve_cmd
from agent_bench.util.log_config import setup_logger

logger = setup_logger(__name__)


class Runner(ABC):
    """Abstract base Runner.

    Subclasses implement build_args. Use super().__init__(...) in subclass
    constructors to initialize the common fields.
    """

    def __init__(self, cmd: str, cwd: Optional[Path] = None) -> None:
        self.cmd = cmd
        self.cwd = cwd
        self._resolved: Optional[str] = None

    def resolve(self) -> str:
        """Resolve the executable once; raises FileNotFoundError if it is missing."""
        if self._resolved is None:
            self._resolved = resolve_cmd(self.cmd)
        return self._resolved

    @abstractmethod
    def build_args(self) -> List[str]:
        """Full argument vector, executable first."""
        pass

    def run(self) -> subprocess.CompletedProcess:
        """
        Run the command to completion with output streaming to the console.

        Raises:
            subprocess.CalledProcessError: if the command exits non-zero.
        """
        self.before_run()
        args = self.build_args()
        logger.debug(f"Running: {' '.join(args)}")
        try:
            return subprocess.run(args, cwd=self.cwd, check=True, text=True)
        finally:
            self.after_run()

    def before_run(self) -> None:
        pass

    def after_run(self) -> None:
        pass

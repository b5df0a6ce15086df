#!/usr/bin/env python3
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from agent_bench.consts.AgentType import AgentType
from agent_bench.util.file_utils import resolve_cmd
from agent_bench.util.log_config import setup_logger

logger = setup_logger(__name__)


class CargoBuilder:
    """Compile agent-named solver binaries with cargo."""

    def __init__(self, cmd: str = "cargo", args: Sequence[str] = ("build", "--release"),
                 cwd: Optional[Path] = None):
        self.cmd = cmd
        self.args = list(args)
        self.cwd = cwd

    @staticmethod
    def binary_names(day: str, agents: List[AgentType]) -> List[str]:
        return [agent.binary_name(day) for agent in agents]

    def build_args(self, binaries: List[str]) -> List[str]:
        args = [resolve_cmd(self.cmd)] + self.args
        for name in binaries:
            args += ["--bin", name]
        return args

    def build(self, day: str, agents: List[AgentType]) -> None:
        """
        Build every binary in one cargo invocation.

        Raises:
            FileNotFoundError: if cargo is not installed.
            subprocess.CalledProcessError: if the build fails.
        """
        binaries = self.binary_names(day, agents)
        if not binaries:
            logger.warning("No binaries to build")
            return
        args = self.build_args(binaries)
        logger.info(f"Building {len(binaries)} binaries: {', '.join(binaries)}")
        try:
            subprocess.run(args, cwd=self.cwd, check=True, text=True)
        except subprocess.CalledProcessError as e:
            logger.error(f"`cargo` failed with return code {e.returncode}. Command: {' '.join(args)}")
            raise
        logger.info("✓ Build completed")

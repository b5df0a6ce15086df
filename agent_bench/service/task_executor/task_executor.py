from pathlib import Path
from typing import Callable, List, Optional

from agent_bench.config.benchmark_config import BenchmarkConfig
from agent_bench.models.experiment_params import ExperimentParams
from agent_bench.service.builder.cargo_builder import CargoBuilder
from agent_bench.service.runner.hyperfine_runner import HyperfineRunner
from agent_bench.service.task_executor.task_execute_result import TaskExecuteResult
from agent_bench.util.log_config import setup_logger

logger = setup_logger(__name__)


class TaskExecutor:
    """
    Run the benchmark groups of one configuration, fail-fast.

    Order: check hyperfine, build (if enabled), check binaries, then for each
    group run hyperfine and print its markdown report.
    """

    def __init__(self, config: BenchmarkConfig, experiments: List[ExperimentParams],
                 cwd: Optional[Path] = None, builder: Optional[CargoBuilder] = None,
                 echo: Callable[[str], None] = print):
        self.config = config
        self.experiments = experiments
        self.cwd = cwd
        self.builder = builder or CargoBuilder(cmd=config.cargo_cmd, args=config.cargo_args, cwd=cwd)
        self.echo = echo
        self.runners = [HyperfineRunner.from_experiment(exp, cwd=cwd) for exp in experiments]

    def check_tools(self) -> None:
        """Raises ToolNotFoundError if hyperfine is missing."""
        for runner in self.runners:
            runner.check_available()

    def build(self) -> None:
        if not self.config.build:
            logger.info("Skipping build (build disabled)")
            return
        logger.info("Building binaries...")
        self.builder.build(self.config.day, self.config.agents)

    def verify_binaries(self) -> None:
        """Raises FileNotFoundError naming every benchmarked binary that does not exist."""
        base = self.cwd or Path.cwd()
        missing = []
        for exp in self.experiments:
            for target in exp.targets:
                path = target.binary if target.binary.is_absolute() else base / target.binary
                if not path.is_file() and str(target.binary) not in missing:
                    missing.append(str(target.binary))
        if missing:
            raise FileNotFoundError(
                f"Binary not found: {', '.join(missing)}. Build them first (cargo build --release)."
            )

    def execute(self) -> List[TaskExecuteResult]:
        """
        Run every benchmark group in order.

        Raises:
            ToolNotFoundError: hyperfine is not installed.
            FileNotFoundError: cargo or a binary is missing.
            subprocess.CalledProcessError: build or benchmark failed; later
                groups are not run.
        """
        self.check_tools()
        self.build()
        self.verify_binaries()

        results = []
        for idx, (exp, runner) in enumerate(zip(self.experiments, self.runners), 1):
            logger.info(f"Running {exp.label}benchmarks... ({idx}/{len(self.experiments)}: {exp.group_name})")
            logger.debug(str(exp))
            runner.run()
            report = runner.read_report()
            self.echo(f"{exp.label}Benchmark results:")
            self.echo(report)
            logger.info(f"✓ Report written to: {exp.markdown_path}")
            results.append(TaskExecuteResult(
                group_name=exp.group_name,
                label=exp.label,
                markdown_path=exp.markdown_path,
                json_path=exp.json_path,
                report=report,
            ))
        return results

"""
End-to-end tests of the aoc-bench entry point.

cargo and hyperfine are replaced by FakeTools (see conftest), so these tests
check orchestration: ordering, fail-fast behaviour, exit codes and output.
"""
import logging

import pytest

from agent_bench import run_benchmark
from agent_bench.service.runner.hyperfine_runner import INSTALL_HINT


class TestCombinedRun:
    """No flags: build everything, one hyperfine run, print the report."""

    def test_exit_zero_and_report_written(self, fake_tools, workspace, capsys):
        assert run_benchmark.main([]) == 0
        report = workspace / "day03_benchmark.md"
        assert report.exists()
        assert (workspace / "day03_benchmark.json").exists()
        out = capsys.readouterr().out
        assert "Benchmark results:" in out
        assert report.read_text() in out

    def test_builds_before_benchmarking(self, fake_tools, workspace):
        run_benchmark.main([])
        tools = [c[0].rsplit("/", 1)[-1] for c in fake_tools.calls]
        assert tools == ["cargo", "hyperfine"]
        cargo = fake_tools.tool_calls("cargo")[0]
        assert cargo[1:3] == ["build", "--release"]
        assert [cargo[i + 1] for i, a in enumerate(cargo) if a == "--bin"] == [
            "antigravity_day03", "claude_day03", "cursor_day03", "gemini_cli_day03"
        ]

    def test_hyperfine_invocation(self, fake_tools, workspace):
        run_benchmark.main([])
        args = fake_tools.tool_calls("hyperfine")[0]
        assert args[1:6] == ["-N", "--warmup", "3", "--export-markdown", "day03_benchmark.md"]
        assert args[-4:] == [
            "target/release/antigravity_day03",
            "target/release/claude_day03",
            "target/release/cursor_day03",
            "target/release/gemini_cli_day03",
        ]

    def test_binaries_in_working_directory_keep_a_path_prefix(self, fake_tools, workspace):
        for binary in (workspace / "target" / "release").iterdir():
            (workspace / binary.name).write_bytes(binary.read_bytes())
        assert run_benchmark.main(["--skip-build", "--binary-dir", "."]) == 0
        args = fake_tools.tool_calls("hyperfine")[0]
        assert args[-4:] == [
            "./antigravity_day03",
            "./claude_day03",
            "./cursor_day03",
            "./gemini_cli_day03",
        ]

    def test_skip_build(self, fake_tools, workspace):
        assert run_benchmark.main(["--skip-build"]) == 0
        assert fake_tools.tool_calls("cargo") == []


class TestSplitRun:

    def test_two_reports_in_order(self, fake_tools, workspace, capsys):
        assert run_benchmark.main(["--env", "split"]) == 0
        assert (workspace / "day03_part1_benchmark.md").exists()
        assert (workspace / "day03_part2_benchmark.md").exists()
        assert fake_tools.tool_calls("cargo") == []
        runs = fake_tools.tool_calls("hyperfine")
        assert [r[-1] for r in runs] == ["target/release/gemini_cli_day03 part1",
                                         "target/release/gemini_cli_day03 part2"]
        out = capsys.readouterr().out
        assert out.index("Part 1 Benchmark results:") < out.index("Part 2 Benchmark results:")

    def test_split_flag(self, fake_tools, workspace):
        assert run_benchmark.main(["--split", "--agents", "claude,cursor"]) == 0
        runs = fake_tools.tool_calls("hyperfine")
        assert len(runs) == 2
        assert runs[0][-2:] == ["target/release/claude_day03 part1", "target/release/cursor_day03 part1"]


class TestFailures:

    def test_missing_hyperfine_exits_one_with_hint(self, fake_tools, workspace, capsys):
        fake_tools.missing.add("hyperfine")
        assert run_benchmark.main([]) == 1
        assert INSTALL_HINT in capsys.readouterr().out
        # checked before anything is built
        assert fake_tools.calls == []

    def test_missing_hyperfine_in_split_mode(self, fake_tools, workspace):
        fake_tools.missing.add("hyperfine")
        assert run_benchmark.main(["--env", "split"]) == 1

    def test_build_failure_stops_the_run(self, fake_tools, workspace):
        fake_tools.fail_on = "cargo"
        fake_tools.fail_code = 101
        assert run_benchmark.main([]) == 101
        assert fake_tools.tool_calls("hyperfine") == []
        assert not (workspace / "day03_benchmark.md").exists()

    def test_benchmark_failure_stops_remaining_groups(self, fake_tools, workspace):
        fake_tools.fail_on = "hyperfine"
        fake_tools.fail_code = 1
        assert run_benchmark.main(["--env", "split"]) == 1
        assert len(fake_tools.tool_calls("hyperfine")) == 1

    def test_missing_binary(self, fake_tools, workspace):
        (workspace / "target" / "release" / "cursor_day03").unlink()
        assert run_benchmark.main(["--skip-build"]) == 1
        assert fake_tools.tool_calls("hyperfine") == []

    def test_invalid_config(self, fake_tools, workspace):
        assert run_benchmark.main(["--agents", "copilot"]) == 1

    def test_missing_cargo(self, fake_tools, workspace):
        fake_tools.missing.add("cargo")
        assert run_benchmark.main([]) == 1


class TestOutputDir:

    def test_reports_go_to_output_dir(self, fake_tools, workspace):
        assert run_benchmark.main(["--skip-build", "--output-dir", "reports"]) == 0
        assert (workspace / "reports" / "day03_benchmark.md").exists()

    def test_log_file(self, fake_tools, workspace):
        log = workspace / "logs" / "bench.log"
        assert run_benchmark.main(["--skip-build", "--log-file", str(log)]) == 0
        assert "Report written" in log.read_text()

    @pytest.fixture(autouse=True)
    def detach_file_handlers(self):
        yield
        for logger in list(logging.Logger.manager.loggerDict.values()):
            if isinstance(logger, logging.Logger) and logger.name.startswith("agent_bench"):
                for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
                    logger.removeHandler(handler)
                    handler.close()

"""
Process Monitor Module

This module provides process resource usage monitoring for solver runs.
"""
import subprocess
import threading
import time
from typing import Optional, List

import psutil

from agent_bench.service.monitor.process_monitor_result import ProcessMonitorResult
from agent_bench.service.monitor.process_snapshot import ProcessSnapshot
from agent_bench.util.log_config import setup_logger

logger = setup_logger(__name__)


class ProcessMonitor:
    """Monitor resource usage of a process"""

    def __init__(self, pid: int, interval: float = 0.01):
        """
        Initialize process monitor.

        Args:
            pid: Process ID to monitor
            interval: Sampling interval in seconds (default: 0.01s = 10ms)
        """
        self.pid = pid
        self.interval = interval
        self.snapshots: List[ProcessSnapshot] = []
        self.running = False
        self.thread: Optional[threading.Thread] = None
        self.process: Optional[psutil.Process] = None
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def start(self):
        """Start monitoring in a background thread"""
        if self.running:
            return

        self.start_time = time.perf_counter()
        try:
            self.process = psutil.Process(self.pid)
            # Initialize CPU percent (first call returns 0.0)
            self.process.cpu_percent(interval=None)
        except psutil.NoSuchProcess:
            logger.warning(f"Process {self.pid} not found")
            return

        self.running = True
        self.thread = threading.Thread(target=self._monitor_loop, daemon=True)
        self.thread.start()

    def stop(self) -> Optional[ProcessMonitorResult]:
        """
        Stop monitoring and return results.

        Returns:
            ProcessMonitorResult or None if no samples collected
        """
        self.running = False
        self.end_time = time.perf_counter()

        if self.thread:
            self.thread.join(timeout=2.0)

        return self.get_results()

    def _sample(self) -> None:
        cpu_percent = self.process.cpu_percent(interval=None)
        rss = self.process.memory_info().rss
        self.snapshots.append(ProcessSnapshot(
            timestamp=time.time(),
            cpu_percent=cpu_percent,
            rss_bytes=rss,
        ))

    def _monitor_loop(self):
        """Main monitoring loop (runs in background thread)"""
        while self.running:
            try:
                if self.process is None or not self.process.is_running():
                    break
                self._sample()
                time.sleep(self.interval)
            except (psutil.NoSuchProcess, psutil.ZombieProcess):
                # Process ended
                break
            except psutil.AccessDenied as e:
                logger.warning(f"Monitor error: {e}")
                break

    def get_results(self) -> Optional[ProcessMonitorResult]:
        """
        Get monitoring results.

        Returns:
            ProcessMonitorResult or None if no samples
        """
        if not self.snapshots:
            return None

        cpu_values = [s.cpu_percent for s in self.snapshots]

        return ProcessMonitorResult(
            peak_cpu_percent=max(cpu_values),
            avg_cpu_percent=sum(cpu_values) / len(cpu_values),
            peak_rss_bytes=max(s.rss_bytes for s in self.snapshots),
            samples_count=len(self.snapshots),
            sampling_interval=self.interval,
            execution_time=self.end_time - self.start_time,
            snapshots=self.snapshots
        )


def monitor_subprocess(process: 'subprocess.Popen', interval: float = 0.01) -> Optional[ProcessMonitorResult]:
    """
    Monitor a subprocess and return process resource usage statistics.

    Args:
        process: subprocess.Popen instance
        interval: Sampling interval in seconds

    Returns:
        ProcessMonitorResult or None if the process exited before it could be sampled
    """
    monitor = ProcessMonitor(process.pid, interval=interval)
    monitor.start()

    process.wait()

    return monitor.stop()

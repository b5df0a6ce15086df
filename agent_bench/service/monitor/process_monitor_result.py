from dataclasses import dataclass
from typing import List

from agent_bench.service.monitor.process_snapshot import ProcessSnapshot


@dataclass
class ProcessMonitorResult:
    """Process resource monitoring results"""
    # CPU statistics
    peak_cpu_percent: float
    avg_cpu_percent: float
    # Memory statistics
    peak_rss_bytes: int
    samples_count: int
    sampling_interval: float
    execution_time: float

    # All snapshots for detailed analysis
    snapshots: List[ProcessSnapshot]

    @property
    def peak_rss_mb(self) -> float:
        return self.peak_rss_bytes / (1024 * 1024)

import statistics

from agent_bench.service.task_executor.task_execute_result import StatSummary


def calculate_stat_summary(values: list[float]) -> StatSummary:
    """Calculate statistical summary from a list of numeric values"""
    if not values:
        return StatSummary(raw_data=[], min=0, max=0, p50=0, p95=0, p99=0, avg=0, stddev=0)

    sorted_values = sorted(values)
    n = len(sorted_values)

    return StatSummary(
        raw_data=list(values),
        min=sorted_values[0],
        max=sorted_values[-1],
        p50=sorted_values[int(n * 0.50)],
        p95=sorted_values[int(n * 0.95)] if n > 1 else sorted_values[0],
        p99=sorted_values[int(n * 0.99)] if n > 1 else sorted_values[0],
        avg=sum(sorted_values) / n,
        stddev=statistics.stdev(sorted_values) if n > 1 else 0.0,
    )


def relative_to_fastest(values: list[float]) -> list[float]:
    """Express each value as a multiple of the smallest one (fastest = 1.0)."""
    if not values:
        return []
    fastest = min(values)
    if fastest <= 0:
        return [1.0 if v == fastest else float("inf") for v in values]
    return [v / fastest for v in values]

"""Configuration module for agent benchmark runs."""

from .benchmark_config import BenchmarkConfig
from .config_loader import ConfigLoader, DEFAULT_CONFIG_PATH

__all__ = ["BenchmarkConfig", "ConfigLoader", "DEFAULT_CONFIG_PATH"]

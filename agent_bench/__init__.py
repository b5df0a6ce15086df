"""Build, benchmark and compare agent-authored Advent of Code solutions."""

__version__ = "0.1.0"

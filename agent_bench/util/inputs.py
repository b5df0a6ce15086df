"""
Puzzle input loading.

Inputs live in one directory as ``<day>.txt`` (e.g. ``input/03.txt``). The
directory comes from the ``AOC_INPUT_DIR`` environment variable, falling
back to ``./input``.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

INPUT_DIR_ENV = "AOC_INPUT_DIR"
DEFAULT_INPUT_DIR = "input"


def get_input_path(day: str, base_dir: Optional[Path] = None) -> Path:
    """Returns the path to the input file for the given day."""
    base = Path(base_dir) if base_dir is not None else Path(os.environ.get(INPUT_DIR_ENV, DEFAULT_INPUT_DIR))
    return (base / day).with_suffix(".txt")


def read_file_as_string(day: str, base_dir: Optional[Path] = None) -> str:
    return get_input_path(day, base_dir).read_text(encoding="utf-8")


def read_file_as_lines(day: str, base_dir: Optional[Path] = None) -> List[str]:
    """Reads the input file for the given day, one string per line."""
    with open(get_input_path(day, base_dir), "r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f]


def read_int_pairs(day: str, base_dir: Optional[Path] = None) -> Tuple[List[int], List[int]]:
    """Two whitespace-separated integer columns, returned as two lists."""
    left, right = [], []
    for lineno, line in enumerate(read_file_as_lines(day, base_dir), 1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 2:
            raise ValueError(f"Line {lineno}: expected two numbers, got {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return left, right


def read_numbers_with_whitespace(day: str, base_dir: Optional[Path] = None) -> List[int]:
    values = [int(token) for token in read_file_as_string(day, base_dir).split()]
    if any(v < 0 for v in values):
        raise ValueError("Expected non-negative numbers")
    return values


def read_number_grid_with_whitespace(day: str, base_dir: Optional[Path] = None) -> List[List[int]]:
    return [[int(token) for token in line.split()] for line in read_file_as_lines(day, base_dir)]


def read_ascii_grid(day: str, base_dir: Optional[Path] = None) -> List[bytes]:
    return [line.encode("utf-8") for line in read_file_as_lines(day, base_dir)]


def parse_to_number_grid(text: str) -> List[List[int]]:
    """
    Turn each line into its list of decimal digits.

    Non-digit characters are ignored and lines without any digit are dropped.
    """
    grid = []
    for line in text.splitlines():
        row = [int(ch) for ch in line.strip() if ch.isdigit() and ch.isascii()]
        if row:
            grid.append(row)
    return grid


def read_number_grid(day: str, base_dir: Optional[Path] = None) -> List[List[int]]:
    return parse_to_number_grid(read_file_as_string(day, base_dir))


@dataclass
class RangeData:
    ranges: List[Tuple[int, int]] = field(default_factory=list)
    values: List[int] = field(default_factory=list)


def parse_range_data(text: str) -> RangeData:
    """
    Parse ``a-b`` range lines, a blank line, then one value per line.

    Raises:
        ValueError: if there are not exactly two sections, or a range or
            value is malformed, or a range has start > end.
    """
    sections = [s for s in text.split("\n\n") if s.strip()]
    if len(sections) != 2:
        raise ValueError("Input must have two sections separated by empty lines")

    ranges = []
    for line in sections[0].strip().splitlines():
        start_text, sep, end_text = line.partition("-")
        if not sep:
            raise ValueError(f"Missing end of range in {line}")
        try:
            start = int(start_text)
        except ValueError:
            raise ValueError(f"Invalid range start in {line}") from None
        try:
            end = int(end_text)
        except ValueError:
            raise ValueError(f"Invalid range end in {line}") from None
        if start > end:
            raise ValueError(f"Invalid range: start > end ({start}-{end})")
        ranges.append((start, end))

    values = []
    for line in sections[1].strip().splitlines():
        try:
            values.append(int(line.strip()))
        except ValueError:
            raise ValueError(f"Invalid value {line}") from None

    return RangeData(ranges=ranges, values=values)


def read_range_data(day: str, base_dir: Optional[Path] = None) -> RangeData:
    return parse_range_data(read_file_as_string(day, base_dir))

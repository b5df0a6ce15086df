#!/usr/bin/env python3
"""
Day 3: pick digits from each row, in order, to form the largest number.

Part 1 picks two digits per row, part 2 picks twelve; the answer is the
sum over all rows. Several strategies are kept so they can be compared by
the micro benchmark. They all return the same value for the same input.

Run as ``python -m agent_bench.solutions.day03 [part1|part2]``; the output
format matches the agent binaries (``Part 1: <n>``).
"""
import sys
from typing import Callable, Dict, List, Optional, Sequence

from agent_bench.util.inputs import read_number_grid

DAY = "03"
PART1_DIGITS = 2
PART2_DIGITS = 12

Row = Sequence[int]
Grid = Sequence[Row]


def digits_to_number(digits: Row) -> int:
    value = 0
    for d in digits:
        value = value * 10 + d
    return value


def pairwise(row: Row, n: int = PART1_DIGITS) -> int:
    """Try every ordered pair. O(m^2); two digits only."""
    if n != 2:
        raise ValueError("pairwise only supports n=2")
    best = 0
    for i in range(len(row)):
        for j in range(i + 1, len(row)):
            best = max(best, row[i] * 10 + row[j])
    return best


def suffix_max(row: Row, n: int = PART1_DIGITS) -> int:
    """
    Two digits in O(m): the best number starting at i is
    row[i] * 10 + max(row[i+1:]), so track the maximum to the right
    while walking backwards.
    """
    if n != 2:
        raise ValueError("suffix_max only supports n=2")
    if len(row) < 2:
        return 0
    best = 0
    right_max = row[-1]
    for d in reversed(row[:-1]):
        best = max(best, d * 10 + right_max)
        right_max = max(right_max, d)
    return best


def greedy_window(row: Row, n: int) -> int:
    """
    For output position k, take the first maximum of the window that still
    leaves enough digits for the remaining positions. O(m*n).
    """
    if len(row) < n:
        return 0
    result = 0
    start = 0
    for k in range(n):
        end = len(row) - (n - k - 1)
        best_idx = start
        for i in range(start, end):
            if row[i] > row[best_idx]:
                best_idx = i
                if row[i] == 9:
                    break
        result = result * 10 + row[best_idx]
        start = best_idx + 1
    return result


def monotonic_stack(row: Row, n: int) -> int:
    """Drop len(row) - n digits, each time removing a digit smaller than its successor. O(m)."""
    if len(row) < n:
        return 0
    to_remove = len(row) - n
    stack: List[int] = []
    for d in row:
        while to_remove and stack and stack[-1] < d:
            stack.pop()
            to_remove -= 1
        stack.append(d)
    return digits_to_number(stack[:n])


STRATEGIES: Dict[str, Callable[[Row, int], int]] = {
    "pairwise": pairwise,
    "suffix_max": suffix_max,
    "greedy_window": greedy_window,
    "monotonic_stack": monotonic_stack,
}

TWO_DIGIT_ONLY = frozenset({"pairwise", "suffix_max"})


def strategies_for(n: int) -> Dict[str, Callable[[Row, int], int]]:
    """Strategies able to select n digits."""
    return {name: fn for name, fn in STRATEGIES.items() if n == 2 or name not in TWO_DIGIT_ONLY}


def max_joltage(row: Row, n: int) -> int:
    """Largest n-digit number made from row's digits in order; 0 if the row is too short."""
    return greedy_window(row, n)


def total_joltage(grid: Grid, n: int, strategy: str = "greedy_window") -> int:
    fn = STRATEGIES[strategy]
    return sum(fn(row, n) for row in grid)


def part1(grid: Grid, strategy: str = "suffix_max") -> int:
    return total_joltage(grid, PART1_DIGITS, strategy)


def part2(grid: Grid, strategy: str = "greedy_window") -> int:
    return total_joltage(grid, PART2_DIGITS, strategy)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    grid = read_number_grid(DAY)
    selected = argv[0] if argv else ""
    if selected == "part1":
        print(f"Part 1: {part1(grid)}")
    elif selected == "part2":
        print(f"Part 2: {part2(grid)}")
    else:
        print(f"Part 1: {part1(grid)}")
        print(f"Part 2: {part2(grid)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

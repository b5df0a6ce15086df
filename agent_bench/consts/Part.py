from enum import Enum


class Part(Enum):
    PART1 = "part1"
    PART2 = "part2"

    @property
    def title(self) -> str:
        """Human label used in report headers, e.g. 'Part 1'."""
        return f"Part {self.value[-1]}"

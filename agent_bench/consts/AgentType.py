from enum import Enum


class AgentType(Enum):
    ANTIGRAVITY = "antigravity"
    CLAUDE = "claude"
    CURSOR = "cursor"
    GEMINI_CLI = "gemini_cli"
    GEMINI_CLI_3 = "gemini_cli_3"
    CODEX = "codex"
    BASE = "base"

    def binary_name(self, day: str) -> str:
        return f"{self.value}_day{day}"

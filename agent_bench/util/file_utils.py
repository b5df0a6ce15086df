import shutil
from pathlib import Path


class ToolNotFoundError(FileNotFoundError):
    """An external command-line tool could not be found."""

    def __init__(self, tool: str, hint: str = ""):
        self.tool = tool
        self.hint = hint
        super().__init__(hint or f"Executable '{tool}' not found.")


def resolve_cmd(cmd: str) -> str:
    """
    Resolve a command name or path to an absolute executable path.

    Paths (anything containing a separator) are resolved relative to the
    current directory; bare names are looked up on PATH.

    Raises:
        FileNotFoundError: if the executable cannot be found.
    """
    p = Path(cmd)
    if "/" in cmd or "\\" in cmd:
        if p.is_file():
            return str(p.resolve())
        raise FileNotFoundError(f"Executable '{cmd}' not found.")
    found = shutil.which(cmd)
    if found:
        return found
    raise FileNotFoundError(
        f"Executable '{cmd}' not found. "
        f"Either provide a path (e.g. './{cmd}') or ensure it's in PATH."
    )


def command_path(path: Path) -> str:
    """
    String form of an executable path that is never mistaken for a PATH lookup.

    ``Path(".") / "claude_day03"`` collapses to ``claude_day03``; relative
    paths without a directory part get a ``./`` prefix.
    """
    p = Path(path)
    if p.is_absolute() or p.parent != Path("."):
        return str(p)
    return f"./{p}"


def clean_path(path: Path) -> None:
    """
    Delete all files and subdirectories in the given path, but keep the path itself.

    Raises:
        FileNotFoundError: If the path does not exist
        NotADirectoryError: If the path is not a directory
    """
    path_obj = Path(path)

    if not path_obj.exists():
        raise FileNotFoundError(f"Path does not exist: {path}")

    if not path_obj.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {path}")

    for item in path_obj.iterdir():
        if item.is_file() or item.is_symlink():
            item.unlink()
        elif item.is_dir():
            shutil.rmtree(item)

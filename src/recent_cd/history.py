"""Find the shell history file and split it into entries."""

from __future__ import annotations

from pathlib import Path

from recent_cd.constants import HISTORY_NAMES
from recent_cd.errors import NoHistorySourceError, UnreadableHistoryError


def resolve_history_file(home: str | Path, override: str | Path | None = None) -> Path:
    """Return the history file to scan.

    Prefers ~/.zsh_history, then ~/.bash_history. An explicit override skips
    the lookup but must still exist.

    Raises:
        NoHistorySourceError: If no candidate file exists.
    """
    if override:
        path = Path(override).expanduser()
        if path.is_file():
            return path
        raise NoHistorySourceError(f"History file not found: {override}")

    home = Path(home)
    for name in HISTORY_NAMES:
        path = home / name
        if path.is_file():
            return path

    searched = "\n  - ".join(str(home / name) for name in HISTORY_NAMES)
    raise NoHistorySourceError(f"No history file found. Searched:\n  - {searched}")


def read_history_entries(path: str | Path) -> list[str]:
    """Read the whole history file and split it into entries, oldest first."""
    try:
        # zsh stores non-ASCII bytes "metafied", so never fail on decoding
        with open(path, encoding="utf-8", errors="replace") as f:
            content = f.read()
    except OSError as e:
        raise UnreadableHistoryError(f"Error reading history file {path}: {e}") from e
    return content.split("\n")

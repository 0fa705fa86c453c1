"""Turn raw shell history into a list of recently visited directories.

History is walked newest-first while tracking a simulated working directory:
each resolved ``cd`` target becomes the directory that older relative
targets are resolved against.
"""

from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING, Iterable

from recent_cd.constants import CD_PREFIX, DEFAULT_MAX_PATHS, HOME_MARKER
from recent_cd.errors import PathResolutionError

if TYPE_CHECKING:
    from recent_cd.debug_log import DebugLogger

# zsh EXTENDED_HISTORY record: ": <start>:<elapsed>;<command>"
_EXTENDED_RE = re.compile(r"^: \d+:\d+;")


def strip_extended_prefix(entry: str) -> str:
    """Drop the zsh extended-history timestamp header, if present."""
    return _EXTENDED_RE.sub("", entry, count=1)


def parse_cd_target(entry: str) -> str | None:
    """Return the trimmed target of a ``cd <target>`` entry, else None.

    Only a literal, case-insensitive ``cd `` prefix is recognized.
    """
    if not entry.lower().startswith(CD_PREFIX):
        return None
    return entry[len(CD_PREFIX):].strip()


def resolve_target(raw: str, cwd: str, home: str) -> str:
    """Resolve a cd target to a normalized absolute path.

    Raises:
        PathResolutionError: If the target cannot be turned into a path.
    """
    if "\0" in raw:
        raise PathResolutionError(f"Error resolving path {raw!r}: embedded null byte")

    if raw.startswith(HOME_MARKER):
        # "~/proj" and "~proj" both land under home
        path = os.path.join(home, raw[len(HOME_MARKER):].lstrip(os.sep))
    elif os.path.isabs(raw):
        path = raw
    else:
        path = os.path.join(cwd, raw)

    try:
        path = os.path.abspath(os.path.normpath(path))
    except (OSError, ValueError) as e:
        raise PathResolutionError(f"Error resolving path {raw!r}: {e}") from e
    # POSIX normpath keeps a leading "//"; one directory must map to one string
    if path.startswith("//"):
        path = "/" + path.lstrip("/")
    return path


def extract_recent_paths(
    entries: Iterable[str],
    cwd: str,
    home: str,
    max_paths: int = DEFAULT_MAX_PATHS,
    logger: "DebugLogger | None" = None,
    extended_history: bool = True,
) -> list[str]:
    """Collect distinct cd targets, most recent first.

    The cap is checked before each entry with ``>``, so up to
    ``max_paths + 1`` paths can be returned.
    """
    simulated_cwd = cwd
    found: dict[str, None] = {}

    for entry in reversed(list(entries)):
        if len(found) > max_paths:
            break

        if extended_history:
            entry = strip_extended_prefix(entry)
        raw = parse_cd_target(entry)
        if raw is None:
            continue

        try:
            path = resolve_target(raw, simulated_cwd, home)
        except PathResolutionError as e:
            if logger:
                logger.warn(str(e))
            continue

        if path not in found:
            found[path] = None
            if logger:
                logger.log(f"candidate {len(found)}: {path}")
        simulated_cwd = path

    return list(found)

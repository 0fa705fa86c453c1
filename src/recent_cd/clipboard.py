"""Deliver the chosen directory: clipboard first, stdout as fallback."""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
import sys
from typing import TYPE_CHECKING, TextIO

from recent_cd.errors import ClipboardUnavailableError

if TYPE_CHECKING:
    from recent_cd.debug_log import DebugLogger


def format_cd_command(path: str) -> str:
    """Build the shell command that changes into `path`."""
    return f"cd {shlex.quote(path)}"


def default_clipboard_commands() -> list[list[str]]:
    """Clipboard tools to try on this platform, in order of preference."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def copy_to_clipboard(text: str, commands: list[str] | None = None) -> str:
    """Pipe `text` into the first clipboard tool that accepts it.

    Args:
        text: Text to place on the clipboard.
        commands: Command lines to try instead of the platform defaults.

    Returns:
        Name of the tool that succeeded.

    Raises:
        ClipboardUnavailableError: If no tool is installed or all of them failed.
    """
    if commands:
        candidates = []
        for cmd in commands:
            try:
                argv = shlex.split(cmd)
            except ValueError:
                # unbalanced quotes in a configured command line
                continue
            if argv:
                candidates.append(argv)
    else:
        candidates = default_clipboard_commands()

    if not candidates:
        raise ClipboardUnavailableError("no usable clipboard command configured")

    tried = []
    for command in candidates:
        if shutil.which(command[0]) is None:
            continue
        tried.append(command[0])
        try:
            proc = subprocess.run(command, input=text, text=True, check=False)
        except OSError:
            continue
        if proc.returncode == 0:
            return command[0]

    if tried:
        raise ClipboardUnavailableError(f"clipboard tools failed: {', '.join(tried)}")
    names = ", ".join(c[0] for c in candidates)
    raise ClipboardUnavailableError(f"no clipboard tool found (install one of: {names})")


def deliver_selection(
    path: str | None,
    copy: bool = True,
    commands: list[str] | None = None,
    logger: "DebugLogger | None" = None,
    out: TextIO | None = None,
) -> None:
    """Hand the picker result to the user.

    Nothing is printed when no path was chosen.
    """
    if path is None:
        return
    out = out if out is not None else sys.stdout
    command = format_cd_command(path)

    if copy:
        try:
            tool = copy_to_clipboard(command, commands)
        except ClipboardUnavailableError as e:
            if logger:
                logger.warn(f"{e}; copy the command below by hand")
        else:
            if logger:
                logger.log(f"copied with {tool}: {command}")
            print(f"The command '{command}' has been copied to the clipboard.", file=out)
            return

    print(command, file=out)

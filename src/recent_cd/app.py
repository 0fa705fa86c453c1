from __future__ import annotations

import curses
import os
from dataclasses import dataclass
from pathlib import Path

from recent_cd.clipboard import deliver_selection
from recent_cd.config import Config, get_user_data_dir
from recent_cd.debug_log import DebugLogger
from recent_cd.errors import SetupError
from recent_cd.extractor import extract_recent_paths
from recent_cd.history import read_history_entries, resolve_history_file
from recent_cd.ui import run_picker


@dataclass
class Environment:
    """Process-wide facts read once at startup."""

    home: str
    cwd: str


def detect_environment() -> Environment:
    """Read the home and working directories, or raise SetupError."""
    try:
        home = str(Path.home())
    except (RuntimeError, KeyError) as e:
        raise SetupError(f"Error getting home directory: {e}") from e
    try:
        cwd = os.getcwd()
    except OSError as e:
        raise SetupError(f"Error getting current working directory: {e}") from e
    return Environment(home=home, cwd=cwd)


def make_logger(config: Config, debug: bool = False) -> DebugLogger:
    path = config.debug.log_file or (get_user_data_dir() / "debug.log")
    logger = DebugLogger(path)
    if debug:
        try:
            logger.start()
        except OSError as e:
            logger.warn(f"Debug log disabled, cannot open {path}: {e}")
    return logger


def collect_candidates(
    config: Config, env: Environment, logger: DebugLogger | None = None
) -> tuple[Path, list[str]]:
    """Locate and scan history. Returns (history file, candidate paths)."""
    history_file = resolve_history_file(env.home, config.history.file)
    if logger:
        logger.log(f"Current working directory: {env.cwd}")
        logger.log(f"Reading history from {history_file}")
    entries = read_history_entries(history_file)
    paths = extract_recent_paths(
        entries,
        cwd=env.cwd,
        home=env.home,
        max_paths=config.history.max_paths,
        logger=logger,
        extended_history=config.history.extended_history,
    )
    return history_file, paths


def run_app(config: Config, env: Environment, logger: DebugLogger, list_only: bool = False) -> int:
    """Run the whole pipeline. Fatal errors propagate to the caller."""
    history_file, paths = collect_candidates(config, env, logger)

    if list_only:
        for path in paths:
            print(path)
        return 0

    if not paths:
        logger.warn(f"No directory changes found in {history_file}.")
        return 0

    selected = curses.wrapper(run_picker, paths, config.ui)
    logger.log(f"Selected: {selected}")
    deliver_selection(
        selected,
        copy=config.clipboard.enabled,
        commands=config.clipboard.commands,
        logger=logger,
    )
    return 0

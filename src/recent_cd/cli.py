import argparse
import sys

from recent_cd import __version__
from recent_cd.app import detect_environment, make_logger, run_app
from recent_cd.config import load_config, validate_max_paths
from recent_cd.errors import RecentCdError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="recent-cd",
        description="Pick a recently visited directory from your shell history",
    )
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="default",
                   help="Configuration name or path (searches ~/.recent-cd/configs/, ./configs/, or use full path)")
    p.add_argument("-n", "--max-paths", type=int, default=None,
                   help="Stop collecting once more than this many directories are found (default: 10)")
    p.add_argument("--history-file", default=None,
                   help="Read this history file instead of ~/.zsh_history or ~/.bash_history")
    p.add_argument("--no-clipboard", action="store_true", default=False,
                   help="Print the cd command instead of copying it to the clipboard")
    p.add_argument("-l", "--list", action="store_true", default=False,
                   help="Print the candidate directories and exit without the picker")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Append debug logging to ~/.recent-cd/debug.log")
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        p.error(str(e))

    # CLI arguments override config values
    if args.max_paths is not None:
        try:
            config.history.max_paths = validate_max_paths(args.max_paths, "--max-paths")
        except ValueError as e:
            p.error(str(e))
    if args.history_file is not None:
        config.history.file = args.history_file
    if args.no_clipboard:
        config.clipboard.enabled = False

    logger = make_logger(config, debug=args.debug)
    try:
        env = detect_environment()
        code = run_app(config, env, logger, list_only=args.list)
    except RecentCdError as e:
        logger.warn(str(e))
        code = 1
    finally:
        logger.stop()
    sys.exit(code)

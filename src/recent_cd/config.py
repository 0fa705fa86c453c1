"""Configuration system with minimal YAML parser.

Config files live in ~/.recent-cd/configs/ or ./configs/ and are parsed
without external dependencies. The YAML subset understood here:
- Scalars (strings, numbers, booleans, null)
- Lists of scalars (- item syntax)
- Nested dictionaries (key: value syntax)
- Comments (# ...)
- Quoted strings (single and double)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from recent_cd.constants import DEFAULT_FOOTER, DEFAULT_MAX_PATHS, DEFAULT_TITLE

# --- Minimal YAML Parser ---


def parse_simple_yaml(text: str) -> dict:
    """Parse a simple YAML document into a Python dict."""
    result = _parse_block(text.split("\n"), 0, 0)[0]
    return result if isinstance(result, dict) else {}


def _parse_block(lines: list[str], start: int, base_indent: int) -> tuple[dict | list, int]:
    """Parse the block starting at line `start` whose lines share `base_indent`."""
    result: dict | list = {}
    i = start

    while i < len(lines):
        line = lines[i]
        stripped = line.lstrip()

        if not stripped or stripped.startswith("#"):
            i += 1
            continue

        indent = len(line) - len(stripped)
        if indent < base_indent:
            break

        is_item = stripped.startswith("- ") or stripped == "-"
        if is_item and result == {}:
            result = []
        # A mapping key after a list (or an item inside a mapping) ends the block
        if is_item != isinstance(result, list):
            break

        if is_item:
            result.append(_parse_value(_remove_inline_comment(stripped[1:].strip())))
            i += 1
            continue

        colon_pos = _find_unquoted_colon(stripped)
        if colon_pos <= 0:
            i += 1
            continue

        key = stripped[:colon_pos].strip()
        value_part = _remove_inline_comment(stripped[colon_pos + 1 :].strip())
        if value_part:
            result[key] = _parse_value(value_part)
            i += 1
            continue

        # Look past blanks and comments for a nested block
        j = i + 1
        while j < len(lines) and (not lines[j].strip() or lines[j].lstrip().startswith("#")):
            j += 1
        if j < len(lines):
            next_indent = len(lines[j]) - len(lines[j].lstrip())
            # A list may sit at the same indent as its key
            is_list = lines[j].lstrip().startswith("-")
            if next_indent > indent or (is_list and next_indent == indent):
                result[key], i = _parse_block(lines, j, next_indent)
                continue
        result[key] = None
        i += 1

    return result, i


def _find_unquoted_colon(s: str) -> int:
    """Find the position of the first ``key:`` colon not inside quotes."""
    in_single = False
    in_double = False
    for i, c in enumerate(s):
        if c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif c == ":" and not in_single and not in_double:
            if i + 1 == len(s) or s[i + 1] == " ":
                return i
    return -1


def _remove_inline_comment(s: str) -> str:
    """Remove a `` #`` comment that is not inside quotes."""
    in_single = False
    in_double = False
    for i, c in enumerate(s):
        if c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif c == "#" and not in_single and not in_double and (i == 0 or s[i - 1] == " "):
            return s[:i].rstrip()
    return s


_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"'}


def _parse_value(s: str) -> str | int | float | bool | None:
    """Parse a scalar YAML value."""
    s = s.strip()
    if not s:
        return None

    lower = s.lower()
    if lower in ("null", "~", "none"):
        return None
    if lower in ("true", "yes", "on"):
        return True
    if lower in ("false", "no", "off"):
        return False

    if len(s) >= 2:
        if s[0] == '"' and s[-1] == '"':
            out = []
            chars = iter(s[1:-1])
            for c in chars:
                if c == "\\":
                    nxt = next(chars, "")
                    out.append(_ESCAPES.get(nxt, "\\" + nxt))
                else:
                    out.append(c)
            return "".join(out)
        if s[0] == "'" and s[-1] == "'":
            return s[1:-1].replace("''", "'")

    try:
        if "." in s:
            return float(s)
        return int(s)
    except ValueError:
        pass

    return s


# --- Configuration Dataclasses ---


@dataclass
class HistoryConfig:
    """Where history comes from and how much of it becomes candidates."""

    file: str | None = None
    max_paths: int = DEFAULT_MAX_PATHS
    extended_history: bool = True


@dataclass
class UIConfig:
    """Picker text and key settings."""

    title: str = DEFAULT_TITLE
    footer: str = DEFAULT_FOOTER
    vi_keys: bool = True
    highlight: str = "reverse"


@dataclass
class ClipboardConfig:
    enabled: bool = True
    # Each entry is a full command line, e.g. "xclip -selection clipboard"
    commands: list[str] = field(default_factory=list)


@dataclass
class DebugConfig:
    log_file: str | None = None


@dataclass
class Config:
    """Complete application configuration."""

    history: HistoryConfig = field(default_factory=HistoryConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    clipboard: ClipboardConfig = field(default_factory=ClipboardConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


# --- Config Loading ---


def get_user_data_dir() -> Path:
    """Get the user's recent-cd data directory ($HOME/.recent-cd)."""
    return Path.home() / ".recent-cd"


def _is_path(config_name_or_path: str) -> bool:
    return (
        "/" in config_name_or_path
        or "\\" in config_name_or_path
        or config_name_or_path.endswith(".yml")
    )


def _get_config_search_paths(config_name: str) -> list[Path]:
    """Candidate locations for a named config, highest priority first."""
    config_filename = f"{config_name}.yml"
    return [
        get_user_data_dir() / "configs" / config_filename,
        Path.cwd() / "configs" / config_filename,
    ]


def _find_config_file(config_name_or_path: str) -> Path | None:
    """Find a config file by name or path.

    Search order:
    1. If it looks like a path (contains / or \\ or ends in .yml), treat as path
    2. $HOME/.recent-cd/configs/<name>.yml
    3. Current working directory configs/<name>.yml
    """
    if _is_path(config_name_or_path):
        path = Path(config_name_or_path).expanduser()
        return path if path.is_file() else None

    for path in _get_config_search_paths(config_name_or_path):
        if path.is_file():
            return path
    return None


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Args:
        config_name_or_path: Name of config file (without .yml extension),
                            or path to a config file. If None or empty, uses 'default'.

    Returns:
        Config object with loaded values merged over defaults.

    Raises:
        FileNotFoundError: If a non-default config is specified but not found.
        ValueError: If a config value is invalid.
    """
    if not config_name_or_path:
        config_name_or_path = "default"

    config_path = _find_config_file(config_name_or_path)
    config = get_default_config()

    if config_path is None:
        if config_name_or_path == "default":
            return config
        if _is_path(config_name_or_path):
            raise FileNotFoundError(f"Config file not found: {config_name_or_path}")
        paths_str = "\n  - ".join(str(p) for p in _get_config_search_paths(config_name_or_path))
        raise FileNotFoundError(
            f"Config '{config_name_or_path}' not found. Searched:\n  - {paths_str}"
        )

    with open(config_path, encoding="utf-8") as f:
        _merge_config(config, parse_simple_yaml(f.read()))
    return config


def validate_max_paths(value, name: str = "history.max_paths") -> int:
    """Return `value` as a candidate cap, or raise ValueError if it is not one."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def _section(data: dict, name: str) -> dict:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object."""
    if not isinstance(data, dict):
        return

    history = _section(data, "history")
    if "file" in history:
        config.history.file = str(history["file"]) if history["file"] is not None else None
    if "max_paths" in history:
        config.history.max_paths = validate_max_paths(history["max_paths"])
    if "extended_history" in history:
        config.history.extended_history = bool(history["extended_history"])

    ui = _section(data, "ui")
    if "title" in ui:
        config.ui.title = str(ui["title"])
    if "footer" in ui:
        config.ui.footer = str(ui["footer"])
    if "vi_keys" in ui:
        config.ui.vi_keys = bool(ui["vi_keys"])
    if "highlight" in ui:
        config.ui.highlight = str(ui["highlight"]).lower()

    clipboard = _section(data, "clipboard")
    if "enabled" in clipboard:
        config.clipboard.enabled = bool(clipboard["enabled"])
    if isinstance(clipboard.get("commands"), list):
        config.clipboard.commands = [str(cmd) for cmd in clipboard["commands"]]

    debug = _section(data, "debug")
    if "log_file" in debug:
        config.debug.log_file = str(debug["log_file"]) if debug["log_file"] is not None else None


def get_default_config() -> Config:
    """Return a Config with all default values."""
    return Config()

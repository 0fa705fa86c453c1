# History entry syntax
CD_PREFIX = "cd "
HOME_MARKER = "~"

# History sources, in order of preference
ZSH_HISTORY_NAME = ".zsh_history"
BASH_HISTORY_NAME = ".bash_history"
HISTORY_NAMES = (ZSH_HISTORY_NAME, BASH_HISTORY_NAME)

DEFAULT_MAX_PATHS = 10

DEFAULT_TITLE = "Which path do you want to select?"
DEFAULT_FOOTER = "Press enter to select, q to quit."
EMPTY_LIST_TEXT = "(no directories found)"
CURSOR_MARKER = ">"

# Raw key codes not covered by curses.KEY_*
KEY_ESC = 27
KEY_CTRL_C = 3
KEY_LF = 10
KEY_CR = 13

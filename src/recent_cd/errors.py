class RecentCdError(Exception):
    """Base class for all recent-cd errors."""


class SetupError(RecentCdError):
    """Home or working directory could not be determined."""


class NoHistorySourceError(RecentCdError):
    """Neither a zsh nor a bash history file exists."""


class UnreadableHistoryError(RecentCdError):
    """The history file exists but could not be opened or read."""


class PathResolutionError(RecentCdError):
    """A single cd target could not be turned into an absolute path."""


class ClipboardUnavailableError(RecentCdError):
    """No clipboard tool accepted the text."""

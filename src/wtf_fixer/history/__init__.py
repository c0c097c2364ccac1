"""Shell history lookup for the previously executed command."""

from .errors import (
    BashHistoryStaleError,
    EmptyHistoryError,
    HistoryError,
    HistoryNotFoundError,
    HistoryReadError,
    NoValidCommandError,
    NotEnoughHistoryError,
)
from .locator import ShellType, detect_shell_type, get_history_path, get_last_command

__all__ = [
    "BashHistoryStaleError",
    "EmptyHistoryError",
    "HistoryError",
    "HistoryNotFoundError",
    "HistoryReadError",
    "NoValidCommandError",
    "NotEnoughHistoryError",
    "ShellType",
    "detect_shell_type",
    "get_history_path",
    "get_last_command",
]

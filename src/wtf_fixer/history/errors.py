"""Errors raised while looking up the previous command."""

from __future__ import annotations

BASH_REMEDIATION = (
    "History file is not up to date. Add this to your ~/.bashrc:\n"
    "shopt -s histappend\n"
    "PROMPT_COMMAND='history -a'"
)


class HistoryError(Exception):
    """Base class for history lookup failures."""


class HistoryNotFoundError(HistoryError):
    """No shell history file could be located."""


class HistoryReadError(HistoryError):
    """The history file exists but could not be read."""


class NotEnoughHistoryError(HistoryError):
    """PowerShell history holds fewer than two entries."""

    def __init__(self, message: str = "Not enough history") -> None:
        super().__init__(message)


class EmptyHistoryError(HistoryError):
    """The history file has no lines."""

    def __init__(self, message: str = "Empty history") -> None:
        super().__init__(message)


class NoValidCommandError(HistoryError):
    """Every history entry is blank or a previous wtf invocation."""

    def __init__(self, message: str = "No valid command found in history") -> None:
        super().__init__(message)


class BashHistoryStaleError(HistoryError):
    """Bash history could not be parsed, most likely because it is not flushed yet.

    Bash only writes history to disk when the shell exits, so the
    message carries the settings that make it flush after every prompt.
    """

    def __init__(self, message: str = BASH_REMEDIATION) -> None:
        super().__init__(message)

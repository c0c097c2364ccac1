"""Locate the active shell's history file and read the last command from it."""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Mapping

from .errors import BashHistoryStaleError, HistoryError, HistoryNotFoundError, HistoryReadError
from .parsers import parse_bash_zsh_history, parse_fish_history, parse_powershell_history


class ShellType(Enum):
    """Shell dialects with a known history file format."""

    POWERSHELL = "powershell"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


def detect_shell_type(path: str | Path) -> ShellType:
    """Guess the shell from the history file path.

    This only looks at the path, so a custom ``$HISTFILE`` name without
    "zsh" or "fish" in it is treated as bash.
    """
    path_str = str(path).lower()

    if "powershell" in path_str or "consolehost_history" in path_str:
        return ShellType.POWERSHELL
    if "fish" in path_str:
        return ShellType.FISH
    if "zsh" in path_str:
        return ShellType.ZSH
    return ShellType.BASH


def get_history_path(
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
    home: str | Path | None = None,
) -> Path:
    """Resolve the history file of the current shell.

    Args:
        environ: Environment to read ``HISTFILE``/``APPDATA`` from (default: os.environ)
        platform: Platform identifier (default: sys.platform)
        home: Home directory (default: the current user's home)

    Returns:
        Path to an existing history file

    Raises:
        HistoryNotFoundError: If no candidate file exists
    """
    env = os.environ if environ is None else environ
    platform = platform or sys.platform

    if platform == "win32":
        appdata = env.get("APPDATA")
        if appdata:
            ps_history = (
                Path(appdata) / "Microsoft" / "Windows" / "PowerShell"
                / "PSReadLine" / "ConsoleHost_history.txt"
            )
            if ps_history.exists():
                return ps_history
        raise HistoryNotFoundError("PowerShell history not found")

    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise HistoryNotFoundError("Home directory not found") from e
    home = Path(home)

    histfile = env.get("HISTFILE")
    if histfile:
        path = Path(histfile).expanduser()
        if path.exists():
            return path

    possible_paths = [
        home / ".zsh_history",
        home / ".bash_history",
        home / ".local" / "share" / "fish" / "fish_history",
    ]

    for path in possible_paths:
        if path.exists():
            return path

    raise HistoryNotFoundError("No shell history file found")


def get_last_command(history_path: str | Path | None = None) -> str:
    """Return the most recent command from the shell history.

    Args:
        history_path: History file to read instead of the resolved default

    Returns:
        The previous command line, without shell-specific decoration

    Raises:
        HistoryError: If the history is missing, unreadable or has no usable entry
    """
    path = Path(history_path) if history_path else get_history_path()

    if not path.exists():
        raise HistoryNotFoundError(f"History file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise HistoryReadError(f"Failed to read history: {e}") from e

    shell_type = detect_shell_type(path)

    try:
        if shell_type == ShellType.POWERSHELL:
            return parse_powershell_history(content)
        if shell_type == ShellType.FISH:
            return parse_fish_history(content)
        return parse_bash_zsh_history(content)
    except HistoryError as e:
        if shell_type == ShellType.BASH:
            raise BashHistoryStaleError() from e
        raise

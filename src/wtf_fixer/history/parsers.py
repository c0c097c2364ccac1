"""Per-shell history file parsers.

Each parser takes the full text of a history file and returns the most
recent command the user typed, skipping invocations of wtf itself.
"""

from __future__ import annotations

import re

from .errors import EmptyHistoryError, NoValidCommandError, NotEnoughHistoryError

SELF_COMMAND = "wtf"

# zsh EXTENDED_HISTORY / bash with timestamps: ": <epoch>:<duration>;<command>"
_EXTENDED_ENTRY = re.compile(r"^: \d+:\d+;(.+)$")
_FISH_CMD = re.compile(r"- cmd: (.+)")

def _lines(content: str) -> list[str]:
    """Split on "\n" only, dropping a trailing "\r" and the final empty element."""
    lines = [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def _is_candidate(cmd: str) -> bool:
    return bool(cmd) and not cmd.startswith(SELF_COMMAND)


def parse_powershell_history(content: str) -> str:
    """Return the entry before the current one (the running wtf call)."""
    lines = _lines(content)

    if len(lines) < 2:
        raise NotEnoughHistoryError()

    return lines[-2].strip()


def parse_bash_zsh_history(content: str) -> str:
    """Return the newest non-wtf command from a bash or zsh history file."""
    lines = _lines(content)

    if not lines:
        raise EmptyHistoryError()

    for line in reversed(lines):
        match = _EXTENDED_ENTRY.match(line)
        cmd = match.group(1) if match else line.strip()

        if _is_candidate(cmd):
            return cmd

    raise NoValidCommandError()


def parse_fish_history(content: str) -> str:
    """Return the newest non-wtf ``- cmd:`` entry from a fish history file."""
    for line in reversed(_lines(content)):
        match = _FISH_CMD.search(line)
        if not match:
            continue

        cmd = match.group(1).strip()
        if _is_candidate(cmd):
            return cmd

    raise NoValidCommandError()

"""Bash configuration for writing history after every prompt.

Bash only flushes its history file when the shell exits, so without
these settings the previous command is not on disk yet when wtf runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

HISTAPPEND_LINE = "shopt -s histappend"
PROMPT_COMMAND_LINE = "PROMPT_COMMAND='history -a'"
CONFIG_HEADER = "# wtf: enable real-time history"


def default_bashrc() -> Path:
    return Path.home() / ".bashrc"


def missing_bash_history_lines(content: str) -> list[str]:
    """Return the settings ``content`` still lacks, in the order to append them."""
    missing = []

    if HISTAPPEND_LINE not in content:
        missing.append(HISTAPPEND_LINE)

    if not ("PROMPT_COMMAND" in content and "history -a" in content):
        missing.append(PROMPT_COMMAND_LINE)

    return missing


def needs_bash_history_config(shell: str, bashrc: Path) -> bool:
    """Check whether a bash user's rc file still needs the history settings.

    Args:
        shell: Value of ``$SHELL``
        bashrc: Path to the user's .bashrc

    Returns:
        True only for bash users with an existing, incomplete .bashrc
    """
    if "bash" not in shell:
        return False

    if not bashrc.exists():
        return False

    try:
        content = bashrc.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug(f"Could not read {bashrc}: {e}")
        return False

    return bool(missing_bash_history_lines(content))


def append_bash_history_config(bashrc: Path) -> list[str]:
    """Append the missing history settings to ``bashrc``.

    Returns:
        The lines that were added (empty if already configured)

    Raises:
        OSError: If the file cannot be read or written
    """
    content = bashrc.read_text(encoding="utf-8")
    missing = missing_bash_history_lines(content)

    if not missing:
        return []

    with open(bashrc, "a", encoding="utf-8") as f:
        f.write(f"\n\n{CONFIG_HEADER}\n")
        for line in missing:
            f.write(f"{line}\n")

    logger.info(f"Added {len(missing)} history setting(s) to {bashrc}")
    return missing

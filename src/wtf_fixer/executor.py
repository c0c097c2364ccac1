"""Run a corrected command through the platform shell."""

from __future__ import annotations

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)


class ExecutionError(Exception):
    """Raised when the shell itself cannot be started."""


def shell_argv(cmd: str, platform: str | None = None) -> list[str]:
    """Build the argv that runs ``cmd`` in the platform shell."""
    if (platform or sys.platform) == "win32":
        return ["powershell", "-Command", cmd]
    return ["sh", "-c", cmd]


def execute_command(cmd: str) -> int:
    """Execute a command with inherited stdio.

    Args:
        cmd: Command line to run

    Returns:
        The command's exit code

    Raises:
        ExecutionError: If the shell could not be launched
    """
    argv = shell_argv(cmd)
    logger.debug(f"Executing: {argv}")

    try:
        completed = subprocess.run(argv, check=False)
    except OSError as e:
        raise ExecutionError(f"Failed to execute command: {e}") from e

    return completed.returncode

"""Subprocess helpers for gh and git invocations."""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def execute_gh_command(cmd: list[str], cwd: Path | None = None) -> str:
    """Execute a gh CLI command and return stdout.

    Args:
        cmd: Command and arguments to execute
        cwd: Working directory for command execution

    Returns:
        stdout from the command

    Raises:
        RuntimeError: If command fails or gh is not installed
    """
    logger.debug("Running %s", cmd[:3])
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to execute gh command '{' '.join(cmd[:3])}'"
        if e.stderr:
            error_msg += f": {e.stderr.strip()}"
        raise RuntimeError(error_msg) from e
    except FileNotFoundError as e:
        error_msg = f"Command not found: {cmd[0]}"
        raise RuntimeError(error_msg) from e

"""Production implementation of git operations using subprocess."""

import subprocess
from pathlib import Path

from ghi.core.git.abc import Git


class RealGit(Git):
    """Production implementation using the git CLI."""

    def get_repository_root(self, cwd: Path) -> Path | None:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())

    def get_remote_url(self, repo_root: Path, remote: str) -> str | None:
        result = subprocess.run(
            ["git", "remote", "get-url", remote],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return result.stdout.strip()

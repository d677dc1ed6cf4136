"""
Git working dir — divergence detection through the git CLI.

Uses the git CLI, never raw API calls.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from reqgate.adapters.base import DivergenceCheckError, WorkingDir

logger = logging.getLogger(__name__)

# Marker printed by `git status` when local and upstream both have commits
_DIVERGED_MARKER = "have diverged"


class GitWorkingDir(WorkingDir):
    """Answers divergence questions for a checked-out pull request.

    Args:
        checkout_merge: Whether pull requests are checked out by merging
            them into the target branch. With a plain branch checkout the
            working dir always reflects the head branch, so divergence is
            never reported.
        timeout: Per-command timeout in seconds.
    """

    def __init__(self, checkout_merge: bool = True, timeout: int = 60):
        self.checkout_merge = checkout_merge
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "git"

    def is_available(self) -> bool:
        return shutil.which("git") is not None

    def has_diverged(self, repo_dir: str) -> bool:
        if not self.checkout_merge:
            return False

        if not Path(repo_dir).is_dir():
            raise DivergenceCheckError(f"Working directory does not exist: {repo_dir}")

        # Bring remote refs up to date before comparing
        self._git(["remote", "update"], repo_dir)
        output = self._git(["status", "--untracked-files=no"], repo_dir)

        diverged = _DIVERGED_MARKER in output
        logger.debug("Divergence check in %s: diverged=%s", repo_dir, diverged)
        return diverged

    # ── Helpers ─────────────────────────────────────────────────

    def _git(self, args: list[str], cwd: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise DivergenceCheckError(
                f"git {args[0]} timed out after {self.timeout}s"
            ) from e
        except OSError as e:
            raise DivergenceCheckError(f"Cannot run git: {e}") from e

        if result.returncode != 0:
            logger.warning("git %s failed in %s: %s", args[0], cwd, result.stderr.strip())
            raise DivergenceCheckError(result.stderr.strip() or f"git {args[0]} failed")
        return result.stdout

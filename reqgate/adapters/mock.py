"""
Mock working dir — test double for divergence checks.

Answers without touching git. Configurable to report divergence or to
fail, and records every directory it was asked about.
"""

from __future__ import annotations

from reqgate.adapters.base import DivergenceCheckError, WorkingDir


class MockWorkingDir(WorkingDir):
    """Universal mock working dir for testing.

    By default, reports no divergence. Can be configured per repo dir.
    """

    def __init__(
        self,
        diverged: bool = False,
        available: bool = True,
        error: str | None = None,
    ):
        self._diverged = diverged
        self._available = available
        self._error = error
        self._responses: dict[str, bool] = {}
        self._call_log: list[str] = []

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_log(self) -> list[str]:
        """All repo dirs this mock has been asked about."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times has_diverged has been called."""
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def set_diverged(self, repo_dir: str, diverged: bool = True) -> None:
        """Set a custom answer for a specific repo dir."""
        self._responses[repo_dir] = diverged

    def set_failure(self, error: str = "Mock failure") -> None:
        """Make every subsequent call raise DivergenceCheckError."""
        self._error = error

    def has_diverged(self, repo_dir: str) -> bool:
        self._call_log.append(repo_dir)

        if self._error is not None:
            raise DivergenceCheckError(self._error)

        return self._responses.get(repo_dir, self._diverged)

    def reset(self) -> None:
        """Clear call log, custom answers and configured failure."""
        self._call_log.clear()
        self._responses.clear()
        self._error = None

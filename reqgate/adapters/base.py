"""
Working directory base — the contract between the validator and the VCS.

The validator never touches git directly. It asks a WorkingDir whether
the pull request's branch has fallen behind its target, and that is the
only question in the whole validation path that may block or fail.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DivergenceCheckError(Exception):
    """Raised when divergence cannot be determined (I/O, timeout, git error)."""


class WorkingDir(ABC):
    """Abstract base class for divergence oracles.

    To create a new working dir binding:
        1. Subclass WorkingDir
        2. Implement name, is_available, has_diverged
        3. Pass it to DefaultCommandRequirementHandler
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The binding identifier (e.g., 'git', 'mock')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the underlying tool is available. Never raises."""

    @abstractmethod
    def has_diverged(self, repo_dir: str) -> bool:
        """Whether the target branch has moved past the pull request's base.

        Args:
            repo_dir: Checked-out working directory of the pull request.

        Raises:
            DivergenceCheckError: If the answer cannot be determined.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

"""Adapters — bindings for the divergence oracle.

Public re-exports for convenient access.
"""

from reqgate.adapters.base import DivergenceCheckError, WorkingDir
from reqgate.adapters.mock import MockWorkingDir
from reqgate.adapters.vcs.git import GitWorkingDir

__all__ = [
    "DivergenceCheckError",
    "GitWorkingDir",
    "MockWorkingDir",
    "WorkingDir",
]

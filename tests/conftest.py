"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from reqgate.adapters.mock import MockWorkingDir
from reqgate.core.models import (
    ApprovalStatus,
    ProjectContext,
    PullReqStatus,
)
from reqgate.core.validator import DefaultCommandRequirementHandler


@pytest.fixture
def working_dir() -> MockWorkingDir:
    """A divergence oracle that reports no divergence."""
    return MockWorkingDir()


@pytest.fixture
def handler(working_dir: MockWorkingDir) -> DefaultCommandRequirementHandler:
    """Default requirement handler wired to the mock working dir."""
    return DefaultCommandRequirementHandler(working_dir)


@pytest.fixture
def make_ctx():
    """Build a ProjectContext; approval and mergeability default to True."""

    def _make(approved: bool = True, mergeable: bool = True, **kwargs) -> ProjectContext:
        return ProjectContext(
            project_name=kwargs.pop("project_name", "app"),
            pull_req_status=PullReqStatus(
                approval_status=ApprovalStatus(is_approved=approved),
                mergeable=mergeable,
            ),
            **kwargs,
        )

    return _make


@pytest.fixture
def repo_dir(tmp_path: Path) -> str:
    """A throwaway checkout directory."""
    path = tmp_path / "repo"
    path.mkdir()
    return str(path)


@pytest.fixture(autouse=True)
def _clean_log_env(monkeypatch):
    """Keep the caller's REQGATE_LOG_* settings out of test output."""
    for name in ("REQGATE_LOG_LEVEL", "REQGATE_LOG_FILE", "REQGATE_LOG_FILE_LEVEL"):
        monkeypatch.delenv(name, raising=False)

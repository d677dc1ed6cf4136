"""
Pull request state — snapshots observed by the caller.

These are never refreshed here. The orchestrator fetches them once per
command invocation and hands them over inside a ProjectContext.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ProjectPlanStatus(StrEnum):
    """Outcome of the latest operation on a project in this pull request."""

    PENDING = "pending"
    ERRORED = "errored"
    PLANNED = "planned"
    PLANNED_NO_CHANGES = "planned_no_changes"
    APPLIED = "applied"
    DISCARDED = "discarded"
    PASSED_POLICY = "passed_policy"
    ERRORED_POLICY = "errored_policy"
    IMPORTED = "imported"
    IMPORT_ERRORED = "import_errored"
    STATE_RM = "state_rm"
    STATE_RM_ERRORED = "state_rm_errored"

    @property
    def satisfies_dependency(self) -> bool:
        """Whether a dependent project may proceed past this status."""
        return self in DEPENDENCY_SATISFIED_STATUSES


DEPENDENCY_SATISFIED_STATUSES = frozenset({
    ProjectPlanStatus.APPLIED,
    ProjectPlanStatus.PLANNED_NO_CHANGES,
})


class ApprovalStatus(BaseModel):
    """Approval state of the pull request as reported by the VCS host."""

    is_approved: bool = False
    approved_by: str = ""
    date: str | None = None


class PullReqStatus(BaseModel):
    """Approval and mergeability of the pull request."""

    approval_status: ApprovalStatus = Field(default_factory=ApprovalStatus)
    mergeable: bool = False


class ProjectResult(BaseModel):
    """A sibling project and the status of its latest operation."""

    project_name: str
    status: ProjectPlanStatus = ProjectPlanStatus.PENDING
    repo_rel_dir: str = "."
    workspace: str = "default"


class PullStatus(BaseModel):
    """Per-project results recorded so far for this pull request.

    Names are not guaranteed unique: a project that was run several
    times may appear more than once. Lookups take the first entry.
    """

    projects: list[ProjectResult] = Field(default_factory=list)

    def find_project(self, name: str) -> ProjectResult | None:
        """Return the first result recorded for ``name``, or None."""
        for project in self.projects:
            if project.project_name == name:
                return project
        return None

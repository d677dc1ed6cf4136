"""
ProjectContext — the unit of evaluation for the requirement validator.

Built fresh by the orchestrator for every command invocation, consumed
read-only by the validator, then discarded. It has no persisted identity.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from reqgate.core.models.policy import PolicySet, PolicySetStatus
from reqgate.core.models.pull import PullReqStatus, PullStatus
from reqgate.core.models.requirement import CommandName, Requirement


class ProjectContext(BaseModel):
    """Everything the validator needs to know about one project.

    Requirement lists are ordered. The order is a user-facing choice:
    only the first violated requirement is reported.
    """

    project_name: str = ""
    workspace: str = "default"
    repo_rel_dir: str = "."

    # ── Requirements per command ────────────────────────────────
    plan_requirements: list[Requirement] = Field(default_factory=list)
    apply_requirements: list[Requirement] = Field(default_factory=list)
    import_requirements: list[Requirement] = Field(default_factory=list)

    # ── Observed pull request state ─────────────────────────────
    pull_req_status: PullReqStatus = Field(default_factory=PullReqStatus)
    pull_status: PullStatus = Field(default_factory=PullStatus)

    # ── Dependencies ────────────────────────────────────────────
    depends_on: list[str] = Field(default_factory=list)

    # ── Policy checks ───────────────────────────────────────────
    policy_sets: list[PolicySet] = Field(default_factory=list)
    project_policy_status: list[PolicySetStatus] = Field(default_factory=list)

    def requirements_for(self, command: CommandName) -> list[Requirement]:
        """Configured requirement list for a command."""
        if command == CommandName.PLAN:
            return self.plan_requirements
        if command == CommandName.APPLY:
            return self.apply_requirements
        if command == CommandName.IMPORT:
            return self.import_requirements
        raise ValueError(f"Unknown command: {command}")

    def policy_cleared(self) -> bool:
        """Whether every policy set has passed or been approved past.

        A failing policy set clears once it has collected exactly the
        approvals configured for it. Statuses for unconfigured policy
        sets never block. Plan status is deliberately not consulted:
        a failed apply overwrites it and loses the policy failure.
        """
        approve_counts = {ps.name: ps.approve_count for ps in self.policy_sets}
        for status in self.project_policy_status:
            if status.passed:
                continue
            required = approve_counts.get(status.policy_set_name)
            if required is not None and status.approvals != required:
                return False
        return True

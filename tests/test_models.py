"""
Tests for domain models — enums, lookups, policy clearance.
"""

import pytest
from pydantic import ValidationError

from reqgate.core.models import (
    DEPENDENCY_SATISFIED_STATUSES,
    CommandName,
    PolicySet,
    PolicySetStatus,
    ProjectContext,
    ProjectPlanStatus,
    ProjectResult,
    PullSnapshot,
    PullStatus,
    Requirement,
)


class TestRequirement:
    def test_values(self):
        assert [r.value for r in Requirement] == [
            "approved", "mergeable", "undiverged", "policies_passed",
        ]

    def test_context_coerces_strings(self):
        ctx = ProjectContext(plan_requirements=["approved", "undiverged"])
        assert ctx.plan_requirements == [Requirement.APPROVED, Requirement.UNDIVERGED]

    def test_unknown_requirement_rejected(self):
        with pytest.raises(ValidationError):
            ProjectContext(apply_requirements=["signed"])


class TestProjectPlanStatus:
    def test_satisfying_set(self):
        assert DEPENDENCY_SATISFIED_STATUSES == {
            ProjectPlanStatus.APPLIED,
            ProjectPlanStatus.PLANNED_NO_CHANGES,
        }

    def test_satisfies_dependency(self):
        assert ProjectPlanStatus.APPLIED.satisfies_dependency
        assert ProjectPlanStatus.PLANNED_NO_CHANGES.satisfies_dependency
        assert not ProjectPlanStatus.PLANNED.satisfies_dependency
        assert not ProjectPlanStatus.ERRORED.satisfies_dependency


class TestPullStatus:
    def test_find_project_first_match(self):
        pull = PullStatus(projects=[
            ProjectResult(project_name="net", status="errored"),
            ProjectResult(project_name="net", status="applied"),
        ])
        assert pull.find_project("net").status == ProjectPlanStatus.ERRORED

    def test_find_project_missing(self):
        assert PullStatus().find_project("net") is None


class TestProjectContext:
    def test_defaults(self):
        ctx = ProjectContext()
        assert ctx.plan_requirements == []
        assert ctx.depends_on == []
        assert ctx.pull_req_status.mergeable is False
        assert ctx.pull_req_status.approval_status.is_approved is False

    def test_requirements_for(self):
        ctx = ProjectContext(
            plan_requirements=["approved"],
            apply_requirements=["mergeable"],
            import_requirements=["undiverged"],
        )
        assert ctx.requirements_for(CommandName.PLAN) == [Requirement.APPROVED]
        assert ctx.requirements_for(CommandName.APPLY) == [Requirement.MERGEABLE]
        assert ctx.requirements_for(CommandName.IMPORT) == [Requirement.UNDIVERGED]


class TestPolicyCleared:
    def _ctx(self, *statuses, approve_count=1):
        return ProjectContext(
            policy_sets=[PolicySet(name="default", approve_count=approve_count)],
            project_policy_status=list(statuses),
        )

    def test_no_statuses(self):
        assert self._ctx().policy_cleared()

    def test_passed(self):
        assert self._ctx(PolicySetStatus(policy_set_name="default", passed=True)).policy_cleared()

    def test_failed_without_approvals(self):
        ctx = self._ctx(PolicySetStatus(policy_set_name="default", passed=False))
        assert not ctx.policy_cleared()

    def test_failed_but_approved(self):
        ctx = self._ctx(
            PolicySetStatus(policy_set_name="default", passed=False, approvals=2),
            approve_count=2,
        )
        assert ctx.policy_cleared()

    def test_failed_with_too_few_approvals(self):
        ctx = self._ctx(
            PolicySetStatus(policy_set_name="default", passed=False, approvals=1),
            approve_count=2,
        )
        assert not ctx.policy_cleared()

    def test_unconfigured_policy_set_does_not_block(self):
        ctx = self._ctx(PolicySetStatus(policy_set_name="other", passed=False))
        assert ctx.policy_cleared()


class TestPullSnapshot:
    def test_from_dict(self):
        snap = PullSnapshot.model_validate({
            "pull_req_status": {"approval_status": {"is_approved": True}, "mergeable": True},
            "pull_status": {"projects": [{"project_name": "net", "status": "applied"}]},
            "policy_status": {"app": [{"policy_set_name": "default", "passed": True}]},
        })
        assert snap.pull_req_status.approval_status.is_approved
        assert snap.pull_status.projects[0].status == ProjectPlanStatus.APPLIED
        assert snap.policy_status["app"][0].passed

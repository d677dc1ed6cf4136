"""
Command requirement validator — the gate between a request and its execution.

For each gated command (plan, apply, import) the configured requirements
are walked in order and the first violated one is reported as a
human-readable reason. An empty reason means the command may proceed.

Two channels, never conflated:
    - Policy rejection: a non-empty reason string. This is a normal,
      successful outcome ("not allowed right now").
    - Infrastructure failure: DivergenceCheckError raised by the
      working dir, propagated unchanged. Only the undiverged check can
      produce one; every other check is a pure read of the context.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import assert_never

from reqgate.adapters.base import WorkingDir
from reqgate.core.models.context import ProjectContext
from reqgate.core.models.requirement import CommandName, Requirement

logger = logging.getLogger(__name__)


def approval_message(command: CommandName) -> str:
    return (
        "Pull request must be approved according to the project's approval rules "
        f"before running {command}."
    )


def mergeable_message(command: CommandName) -> str:
    return f"Pull request must be mergeable before running {command}."


def undiverged_message(command: CommandName) -> str:
    return f"Default branch must be rebased onto pull request before running {command}."


POLICIES_PASSED_MESSAGE = "All policies must pass for project before running apply."


def dependency_message(project_name: str) -> str:
    return f"Can't apply your project unless you apply its dependencies: [{project_name}]"


class CommandRequirementHandler(ABC):
    """Decides whether a command may run against a project.

    Every method returns a reason string: empty when allowed, otherwise
    the message to show the user.
    """

    @abstractmethod
    def validate_project_dependencies(self, ctx: ProjectContext) -> str:
        """Check that every project in ``ctx.depends_on`` has succeeded."""

    @abstractmethod
    def validate_plan_project(self, repo_dir: str, ctx: ProjectContext) -> str:
        """Check the plan requirements."""

    @abstractmethod
    def validate_apply_project(self, repo_dir: str, ctx: ProjectContext) -> str:
        """Check the apply requirements."""

    @abstractmethod
    def validate_import_project(self, repo_dir: str, ctx: ProjectContext) -> str:
        """Check the import requirements."""


class DefaultCommandRequirementHandler(CommandRequirementHandler):
    """Requirement handler backed by a WorkingDir for divergence checks.

    Args:
        working_dir: Divergence oracle, consulted only when an undiverged
            requirement is reached.
        strict_dependencies: When True, a dependency with no recorded
            result in the pull request blocks. By default it passes,
            since it has simply not been evaluated yet.
    """

    def __init__(self, working_dir: WorkingDir, strict_dependencies: bool = False):
        self.working_dir = working_dir
        self.strict_dependencies = strict_dependencies

    def validate_plan_project(self, repo_dir: str, ctx: ProjectContext) -> str:
        return self._validate(CommandName.PLAN, repo_dir, ctx)

    def validate_apply_project(self, repo_dir: str, ctx: ProjectContext) -> str:
        return self._validate(CommandName.APPLY, repo_dir, ctx)

    def validate_import_project(self, repo_dir: str, ctx: ProjectContext) -> str:
        return self._validate(CommandName.IMPORT, repo_dir, ctx)

    def validate_project_dependencies(self, ctx: ProjectContext) -> str:
        for dependency in ctx.depends_on:
            result = ctx.pull_status.find_project(dependency)
            if result is None:
                if self.strict_dependencies:
                    logger.info(
                        "Project '%s' blocked: dependency '%s' has no result",
                        ctx.project_name, dependency,
                    )
                    return dependency_message(dependency)
                continue
            if not result.status.satisfies_dependency:
                logger.info(
                    "Project '%s' blocked: dependency '%s' is %s",
                    ctx.project_name, dependency, result.status,
                )
                return dependency_message(result.project_name)
        return ""

    # ── Dispatch ────────────────────────────────────────────────

    def _validate(self, command: CommandName, repo_dir: str, ctx: ProjectContext) -> str:
        """Walk the command's requirements in order; first violation wins."""
        for req in ctx.requirements_for(command):
            failure = self._check(command, req, repo_dir, ctx)
            if failure:
                logger.info(
                    "%s blocked for project '%s' by requirement '%s'",
                    command, ctx.project_name, req,
                )
                return failure
        # Passed all configured requirements.
        return ""

    def _check(
        self,
        command: CommandName,
        req: Requirement,
        repo_dir: str,
        ctx: ProjectContext,
    ) -> str:
        if req == Requirement.APPROVED:
            if not ctx.pull_req_status.approval_status.is_approved:
                return approval_message(command)
        elif req == Requirement.MERGEABLE:
            if not ctx.pull_req_status.mergeable:
                return mergeable_message(command)
        elif req == Requirement.UNDIVERGED:
            if self.working_dir.has_diverged(repo_dir):
                return undiverged_message(command)
        elif req == Requirement.POLICIES_PASSED:
            # Only meaningful for apply; plan and import skip it.
            if command == CommandName.APPLY and not ctx.policy_cleared():
                return POLICIES_PASSED_MESSAGE
        else:
            assert_never(req)
        return ""

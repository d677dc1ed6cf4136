"""
Check use case — decide whether one command may run against one project.

Wraps the requirement handler with the surrounding flow: for apply, the
project's dependencies are checked first, then the apply requirements.
A divergence check failure is reported as an error, never as a rejection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from reqgate.adapters.base import DivergenceCheckError
from reqgate.core.models.context import ProjectContext
from reqgate.core.models.requirement import CommandName
from reqgate.core.validator import CommandRequirementHandler

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of a requirement check."""

    command: CommandName
    project: str
    reason: str = ""
    error: str | None = None

    @property
    def allowed(self) -> bool:
        """Whether the command may proceed."""
        return self.error is None and not self.reason

    def to_dict(self) -> dict:
        return {
            "command": str(self.command),
            "project": self.project,
            "allowed": self.allowed,
            "reason": self.reason,
            "error": self.error,
        }


def check_command(
    command: CommandName,
    ctx: ProjectContext,
    repo_dir: Path | str,
    handler: CommandRequirementHandler,
) -> CheckResult:
    """Run the requirement checks for ``command``.

    Args:
        command: The command being requested.
        ctx: Context of the target project.
        repo_dir: Working directory the command would run in.
        handler: Requirement handler to consult.

    Returns:
        CheckResult. ``reason`` holds the first violated requirement;
        ``error`` holds an infrastructure failure, if any.
    """
    result = CheckResult(command=command, project=ctx.project_name)
    repo_dir = str(repo_dir)

    try:
        if command == CommandName.PLAN:
            result.reason = handler.validate_plan_project(repo_dir, ctx)
        elif command == CommandName.APPLY:
            result.reason = handler.validate_project_dependencies(ctx)
            if not result.reason:
                result.reason = handler.validate_apply_project(repo_dir, ctx)
        elif command == CommandName.IMPORT:
            result.reason = handler.validate_import_project(repo_dir, ctx)
        else:
            raise ValueError(f"Unknown command: {command}")
    except DivergenceCheckError as e:
        logger.warning("Cannot check %s requirements for '%s': %s", command, ctx.project_name, e)
        result.reason = ""
        result.error = str(e)

    return result

"""
Requirement and command tags — the vocabulary of the validator.

Requirements are named preconditions configured per command. The set is
closed: adding a member here must be matched by a branch in every
per-command dispatch in ``reqgate.core.validator``.
"""

from __future__ import annotations

from enum import StrEnum


class Requirement(StrEnum):
    """A precondition that must hold before a command executes."""

    APPROVED = "approved"
    MERGEABLE = "mergeable"
    UNDIVERGED = "undiverged"
    POLICIES_PASSED = "policies_passed"  # apply only, added by the server


# Requirements a user may list in requirements.yml.
USER_CONFIGURABLE_REQUIREMENTS = frozenset({
    Requirement.APPROVED,
    Requirement.MERGEABLE,
    Requirement.UNDIVERGED,
})


class CommandName(StrEnum):
    """Workflow commands that are gated by requirements."""

    PLAN = "plan"
    APPLY = "apply"
    IMPORT = "import"

"""
Domain models — Pydantic types for the requirement validator.

All models are re-exported here for convenient access:

    from reqgate.core.models import ProjectContext, Requirement, PullStatus
"""

from reqgate.core.models.context import ProjectContext
from reqgate.core.models.policy import PolicySet, PolicySetStatus
from reqgate.core.models.pull import (
    DEPENDENCY_SATISFIED_STATUSES,
    ApprovalStatus,
    ProjectPlanStatus,
    ProjectResult,
    PullReqStatus,
    PullStatus,
)
from reqgate.core.models.requirement import (
    USER_CONFIGURABLE_REQUIREMENTS,
    CommandName,
    Requirement,
)
from reqgate.core.models.snapshot import PullSnapshot

__all__ = [
    # pull.py
    "DEPENDENCY_SATISFIED_STATUSES",
    # requirement.py
    "USER_CONFIGURABLE_REQUIREMENTS",
    "ApprovalStatus",
    "CommandName",
    # policy.py
    "PolicySet",
    "PolicySetStatus",
    # context.py
    "ProjectContext",
    "ProjectPlanStatus",
    "ProjectResult",
    "PullReqStatus",
    # snapshot.py
    "PullSnapshot",
    "PullStatus",
    "Requirement",
]

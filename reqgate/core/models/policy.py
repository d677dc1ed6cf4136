"""
Policy check models — configured policy sets and their observed outcome.
"""

from __future__ import annotations

from pydantic import BaseModel


class PolicySet(BaseModel):
    """A configured policy set and the approvals needed to override it."""

    name: str
    approve_count: int = 1


class PolicySetStatus(BaseModel):
    """Outcome of one policy set for a project."""

    policy_set_name: str
    passed: bool = False
    approvals: int = 0

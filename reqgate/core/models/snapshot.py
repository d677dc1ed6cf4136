"""
PullSnapshot — observed state of a pull request at one point in time.

Written by whatever fetched the state from the VCS host (a webhook
handler, a CI job) and read here to build ProjectContexts.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from reqgate.core.models.policy import PolicySetStatus
from reqgate.core.models.pull import PullReqStatus, PullStatus


class PullSnapshot(BaseModel):
    """Pull request state shared by every project in the pull request."""

    pull_req_status: PullReqStatus = Field(default_factory=PullReqStatus)
    pull_status: PullStatus = Field(default_factory=PullStatus)

    # Policy outcomes keyed by project name
    policy_status: dict[str, list[PolicySetStatus]] = Field(default_factory=dict)

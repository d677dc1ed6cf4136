"""
Requirements configuration schema — the typed shape of requirements.yml.

Only approved, mergeable and undiverged may be written by users.
policies_passed is added by the server when policy checks are on.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from reqgate.core.models.policy import PolicySet
from reqgate.core.models.requirement import (
    USER_CONFIGURABLE_REQUIREMENTS,
    CommandName,
    Requirement,
)


def _check_requirements(value: list[Requirement] | None) -> list[Requirement] | None:
    if value is None:
        return value
    for req in value:
        if req not in USER_CONFIGURABLE_REQUIREMENTS:
            allowed = ", ".join(sorted(USER_CONFIGURABLE_REQUIREMENTS))
            raise ValueError(f"'{req}' is not configurable. Valid: {allowed}")
    dupes = sorted({r for r in value if value.count(r) > 1})
    if dupes:
        raise ValueError(f"Duplicate requirements: {', '.join(dupes)}")
    return value


class ProjectConfig(BaseModel):
    """A project declared in requirements.yml.

    Requirement lists left unset inherit the top-level defaults.
    """

    name: str
    dir: str = "."
    workspace: str = "default"
    depends_on: list[str] = Field(default_factory=list)

    plan_requirements: list[Requirement] | None = None
    apply_requirements: list[Requirement] | None = None
    import_requirements: list[Requirement] | None = None

    @field_validator("plan_requirements", "apply_requirements", "import_requirements")
    @classmethod
    def check_requirements(cls, value: list[Requirement] | None) -> list[Requirement] | None:
        return _check_requirements(value)


class RequirementsConfig(BaseModel):
    """Root configuration — loaded from requirements.yml."""

    version: int = 1

    policy_check: bool = False
    strict_dependencies: bool = False
    checkout_merge: bool = True

    plan_requirements: list[Requirement] = Field(default_factory=list)
    apply_requirements: list[Requirement] = Field(default_factory=list)
    import_requirements: list[Requirement] = Field(default_factory=list)

    policy_sets: list[PolicySet] = Field(default_factory=list)
    projects: list[ProjectConfig] = Field(default_factory=list)

    @field_validator("plan_requirements", "apply_requirements", "import_requirements")
    @classmethod
    def check_requirements(cls, value: list[Requirement] | None) -> list[Requirement] | None:
        return _check_requirements(value)

    @model_validator(mode="after")
    def check_projects(self) -> RequirementsConfig:
        names = [p.name for p in self.projects]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"Duplicate project names: {', '.join(dupes)}")

        known = set(names)
        for project in self.projects:
            unknown = [d for d in project.depends_on if d not in known]
            if unknown:
                raise ValueError(
                    f"Project '{project.name}' depends on undeclared projects: "
                    f"{', '.join(unknown)}"
                )
            if project.name in project.depends_on:
                raise ValueError(f"Project '{project.name}' depends on itself")
        return self

    def get_project(self, name: str) -> ProjectConfig | None:
        """Look up a project by name."""
        for project in self.projects:
            if project.name == name:
                return project
        return None

    def requirements_for(
        self, command: CommandName, project: ProjectConfig | None = None,
    ) -> list[Requirement]:
        """Effective, ordered requirement list for a command.

        With policy checks on, policies_passed leads the apply list so
        that it is reported ahead of the broader mergeable check.
        """
        field_name = f"{command}_requirements"
        reqs = getattr(project, field_name, None) if project else None
        if reqs is None:
            reqs = getattr(self, field_name)
        reqs = list(reqs)

        if command == CommandName.APPLY and self.policy_check:
            reqs.insert(0, Requirement.POLICIES_PASSED)
        return reqs

"""
Config check use case — validate requirements.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from reqgate.core.config.loader import ConfigError, find_config_file, load_config
from reqgate.core.config.schema import RequirementsConfig
from reqgate.core.models.requirement import CommandName, Requirement


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: RequirementsConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "project_count": len(self.config.projects) if self.config else 0,
            "policy_check": self.config.policy_check if self.config else False,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate requirements configuration and report issues.

    Args:
        config_path: Optional explicit path to requirements.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    if config_path is None:
        result.errors.append("No requirements.yml found.")
        return result
    result.config_path = config_path

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    if not config.projects:
        result.warnings.append("No projects defined. Nothing is gated.")

    if config.policy_check and not config.policy_sets:
        result.warnings.append(
            "policy_check is enabled but no policy_sets are configured; "
            "policy failures cannot be approved past."
        )

    for project in config.projects:
        apply_reqs = config.requirements_for(CommandName.APPLY, project)
        if not [r for r in apply_reqs if r != Requirement.POLICIES_PASSED]:
            result.warnings.append(f"Project '{project.name}' has no apply requirements.")

    result.valid = len(result.errors) == 0
    return result

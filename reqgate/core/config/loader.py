"""
Configuration loader — reads requirements.yml and pull snapshots.

Reads YAML, validates against Pydantic schemas, and returns typed
domain objects. ``build_context`` then joins configuration and observed
state into the ProjectContext the validator consumes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from reqgate.core.config.schema import RequirementsConfig
from reqgate.core.models.context import ProjectContext
from reqgate.core.models.requirement import CommandName
from reqgate.core.models.snapshot import PullSnapshot

logger = logging.getLogger(__name__)

# Default config filename
REQUIREMENTS_CONFIG_FILE = "requirements.yml"


class ConfigError(Exception):
    """Raised when configuration or snapshot files are invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for requirements.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to requirements.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / REQUIREMENTS_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def _read_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML file that must contain a mapping."""
    if not path.is_file():
        raise ConfigError(f"File not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data


def _validate(model: type[BaseModel], data: dict[str, Any], path: Path) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def load_config(path: Path | None = None) -> RequirementsConfig:
    """Load and validate requirements configuration.

    Args:
        path: Explicit path to requirements.yml. If None, searches upward.

    Returns:
        Validated RequirementsConfig model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(
            f"No {REQUIREMENTS_CONFIG_FILE} found. "
            "Create one in the repository root, or specify --config."
        )

    logger.debug("Loading requirements config from %s", path)
    data = _read_mapping(path)

    # The YAML may wrap everything under a "requirements" key or be flat
    if isinstance(data.get("requirements"), dict):
        data = data["requirements"]

    config = _validate(RequirementsConfig, data, path)
    logger.info("Loaded requirements config with %d projects", len(config.projects))
    return config


def load_snapshot(path: Path) -> PullSnapshot:
    """Load a pull request snapshot (approval, mergeability, project results)."""
    logger.debug("Loading pull snapshot from %s", path)
    return _validate(PullSnapshot, _read_mapping(path), path)


def build_context(
    config: RequirementsConfig,
    project_name: str,
    snapshot: PullSnapshot,
) -> ProjectContext:
    """Assemble the ProjectContext for one project.

    Raises:
        ConfigError: If the project is not declared in the configuration.
    """
    project = config.get_project(project_name)
    if project is None:
        raise ConfigError(f"Unknown project: {project_name}")

    return ProjectContext(
        project_name=project.name,
        workspace=project.workspace,
        repo_rel_dir=project.dir,
        plan_requirements=config.requirements_for(CommandName.PLAN, project),
        apply_requirements=config.requirements_for(CommandName.APPLY, project),
        import_requirements=config.requirements_for(CommandName.IMPORT, project),
        pull_req_status=snapshot.pull_req_status,
        pull_status=snapshot.pull_status,
        depends_on=list(project.depends_on),
        policy_sets=list(config.policy_sets),
        project_policy_status=list(snapshot.policy_status.get(project.name, [])),
    )

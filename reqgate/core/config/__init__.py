"""Configuration — requirements.yml schema and loading."""

from reqgate.core.config.loader import (
    ConfigError,
    build_context,
    find_config_file,
    load_config,
    load_snapshot,
)
from reqgate.core.config.schema import ProjectConfig, RequirementsConfig

__all__ = [
    "ConfigError",
    "ProjectConfig",
    "RequirementsConfig",
    "build_context",
    "find_config_file",
    "load_config",
    "load_snapshot",
]

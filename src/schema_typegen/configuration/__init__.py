"""Configuration domain exports."""

from .loader import ConfigurationError, default_configuration, load_configuration
from .project_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    ProjectTemplate,
    ScaffoldError,
    build_project_configuration,
    scaffold_project,
)
from .runtime_settings import ProjectConfiguration

__all__ = [
    "ProjectConfiguration",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "ProjectTemplate",
    "ScaffoldError",
    "build_project_configuration",
    "scaffold_project",
]

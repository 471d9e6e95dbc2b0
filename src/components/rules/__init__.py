"""
Rules component - Locate, load and validate icons_rules.yaml.
"""

from .component import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    resolve_rules_path,
    run,
    run_load,
)
from .models import LoadRulesInput, LoadRulesOutput
from .ports import EnvironmentPort, FileSystemPort

__all__ = [
    # Component entry points
    "run",
    "run_load",
    "resolve_rules_path",
    # Models
    "LoadRulesInput",
    "LoadRulesOutput",
    # Ports
    "FileSystemPort",
    "EnvironmentPort",
    # Constants
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
]

"""
Rules component - Locate and load the icon rules configuration.

Lookup order for the rules file:
1. Explicit path on the input
2. REMIX_ICONS_RULES_PATH environment variable
3. icons_rules.yaml at the project root

Invalid rules must halt configuration loading; callers check ``success``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.rules.loader import parse_rules

from .models import LoadRulesInput, LoadRulesOutput
from .ports import EnvironmentPort, FileSystemPort

logger = logging.getLogger(__name__)

# Default rules file path (relative to project root)
DEFAULT_RULES_PATH = "icons_rules.yaml"
RULES_PATH_ENV = "REMIX_ICONS_RULES_PATH"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(inp: LoadRulesInput, *, env: EnvironmentPort) -> Path:
    """Pick the rules file path from input, environment or project root."""
    if inp.rules_path is not None:
        return Path(inp.rules_path)

    env_path = env.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def run_load(
    inp: LoadRulesInput,
    *,
    fs: FileSystemPort,
    env: EnvironmentPort,
) -> LoadRulesOutput:
    """
    Load and validate rules from the file system.

    Args:
        inp: Input containing optional rules path.
        fs: File system port for reading files.
        env: Environment port for reading env vars.

    Returns:
        LoadRulesOutput with validated rules or errors.
    """
    rules_path = resolve_rules_path(inp, env=env)

    if not fs.exists(rules_path):
        return LoadRulesOutput(
            rules=None,
            source=rules_path,
            errors=[f"Rules file not found: {rules_path}"],
            success=False,
        )

    try:
        rules = parse_rules(fs.read_text(rules_path))
    except (OSError, ValueError) as e:
        logger.error("Failed to load rules from %s: %s", rules_path, e)
        return LoadRulesOutput(
            rules=None,
            source=rules_path,
            errors=[f"Failed to load rules file: {e}"],
            success=False,
        )

    logger.info("Rules loaded from %s", rules_path)
    return LoadRulesOutput(rules=rules, source=rules_path, errors=[], success=True)


def run(
    inp: LoadRulesInput,
    *,
    fs: FileSystemPort,
    env: EnvironmentPort,
) -> LoadRulesOutput:
    """Main entry point for the rules component."""
    return run_load(inp, fs=fs, env=env)

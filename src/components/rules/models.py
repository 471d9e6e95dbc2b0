"""
Rules component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from src.rules.models import Rules


@dataclass(frozen=True)
class LoadRulesInput:
    """Input for loading rules."""

    rules_path: Path | str | None = None


@dataclass(frozen=True)
class LoadRulesOutput:
    """Output from loading rules."""

    rules: Rules | None
    source: Path | None = None
    errors: list[str] = field(default_factory=list)
    success: bool = True

"""
Utilities component input/output models.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Declarations = Mapping[str, str]
ComponentFn = Callable[[Any], Declarations | None]


# --- Rule Models ---


@dataclass(frozen=True)
class MatchRule:
    """A prefix-matched utility: ``<prefix>-<value>`` resolves through fn."""

    prefix: str
    fn: ComponentFn
    values: Mapping[str, Any]


@dataclass(frozen=True)
class CssRule:
    """One rendered utility class."""

    class_name: str
    selector: str
    declarations: tuple[tuple[str, str], ...]

    def render(self) -> str:
        body = "\n".join(f"  {prop}: {value};" for prop, value in self.declarations)
        return f"{self.selector} {{\n{body}\n}}"


# --- Input Models ---


@dataclass(frozen=True)
class GenerateCssInput:
    """Input for generating CSS from class names and markup content."""

    class_names: tuple[str, ...] = ()
    content: tuple[str, ...] = ()


# --- Output Models ---


@dataclass(frozen=True)
class GenerateCssOutput:
    """Output of CSS generation."""

    css: str
    matched: tuple[str, ...]
    unmatched: tuple[str, ...]

"""
Stylesheet component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildStylesheetInput:
    """Class names and markup to build icon CSS for."""

    class_names: tuple[str, ...] = ()
    content: tuple[str, ...] = ()


@dataclass(frozen=True)
class StylesheetResult:
    """Rendered CSS plus which candidates resolved."""

    css: str
    matched: tuple[str, ...]
    unmatched: tuple[str, ...]

"""
Stylesheet component - Build icon CSS end to end.

Rules -> theme -> catalog -> remix plugin -> CSS for the requested classes.
"""

from __future__ import annotations

from pathlib import Path

from src.components.icons import IconSourcePort, default_icon_source
from src.rules.models import Rules

from ._impl import IconStylesheetBuilder
from .models import BuildStylesheetInput, StylesheetResult


def run_build_stylesheet(
    inp: BuildStylesheetInput,
    *,
    builder: IconStylesheetBuilder,
) -> StylesheetResult:
    """
    Generate CSS with an already configured builder.

    Args:
        inp: Class names and markup content.
        builder: Builder holding the catalog and engine.

    Returns:
        StylesheetResult with CSS and matched/unmatched classes.
    """
    return builder.generate(inp)


def build_stylesheet(
    rules: Rules,
    *,
    class_names: tuple[str, ...] = (),
    content: tuple[str, ...] = (),
    base_dir: Path | None = None,
    source: IconSourcePort = default_icon_source,
) -> StylesheetResult:
    """
    One-shot build: load the catalog for ``rules`` and render CSS.

    Raises:
        StylesheetConfigError: If the size token is not in the theme.
        OSError: If the icon tree or an icon file cannot be read.
    """
    builder = IconStylesheetBuilder(rules, base_dir=base_dir, source=source)
    return run_build_stylesheet(
        BuildStylesheetInput(class_names=class_names, content=content),
        builder=builder,
    )


def run(inp: BuildStylesheetInput, *, builder: IconStylesheetBuilder) -> StylesheetResult:
    """Main entry point for the stylesheet component."""
    return run_build_stylesheet(inp, builder=builder)

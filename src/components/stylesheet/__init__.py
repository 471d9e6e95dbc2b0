"""
Stylesheet component - Icon CSS from rules and markup.
"""

from ._impl import (
    IconStylesheetBuilder,
    StylesheetConfigError,
    create_stylesheet_builder,
    resolve_icons_root,
)
from .component import build_stylesheet, run, run_build_stylesheet
from .models import BuildStylesheetInput, StylesheetResult

__all__ = [
    # Entry points
    "run",
    "run_build_stylesheet",
    "build_stylesheet",
    # Models
    "BuildStylesheetInput",
    "StylesheetResult",
    # Builder
    "IconStylesheetBuilder",
    "StylesheetConfigError",
    "create_stylesheet_builder",
    "resolve_icons_root",
]

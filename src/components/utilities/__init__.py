"""
Utilities component - Plugin host for utility classes.

Plugins register prefix-matched rules; the engine resolves class names
and renders CSS.
"""

from ._impl import (
    Plugin,
    PluginApi,
    UtilityEngine,
    escape_class,
    extract_candidates,
    selector_for,
)
from .component import collect_candidates, render_css, run, run_generate_css
from .models import (
    ComponentFn,
    CssRule,
    Declarations,
    GenerateCssInput,
    GenerateCssOutput,
    MatchRule,
)

__all__ = [
    # Entry points
    "run",
    "run_generate_css",
    "collect_candidates",
    "render_css",
    # Models
    "ComponentFn",
    "CssRule",
    "Declarations",
    "GenerateCssInput",
    "GenerateCssOutput",
    "MatchRule",
    # Engine
    "Plugin",
    "PluginApi",
    "UtilityEngine",
    "escape_class",
    "extract_candidates",
    "selector_for",
]

"""
Design tokens component: theme foundations for utility generation.

Provides the default spacing scale, theme construction from configuration
overrides, and dotted-path token lookup (e.g. ``spacing.4``).
"""

from src.components.design_tokens.fc import (
    DEFAULT_SPACING_SCALE,
    Theme,
    ValidationResult,
    build_theme,
    get_spacing_scale,
    resolve_theme_value,
    validate_spacing_token,
)

__all__ = [
    "Theme",
    "ValidationResult",
    "build_theme",
    "get_spacing_scale",
    "resolve_theme_value",
    "validate_spacing_token",
    "DEFAULT_SPACING_SCALE",
]

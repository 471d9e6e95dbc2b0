"""
Design tokens Functional Core: pure theme construction and lookup.

No I/O operations - all functions are pure and deterministic.
Themes are immutable nested mappings; overrides from configuration are
merged over the defaults once, at configuration-load time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

Theme = Mapping[str, Any]


@dataclass
class ValidationResult:
    """Result of a design token validation check."""

    is_valid: bool
    violations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# SPACING SYSTEM
# Base unit: 0.25rem, following Tailwind conventions ("4" is 1rem)
# ═══════════════════════════════════════════════════════════════════════════

DEFAULT_SPACING_SCALE: Mapping[str, str] = MappingProxyType(
    {
        "0": "0px",
        "px": "1px",
        "0.5": "0.125rem",
        "1": "0.25rem",
        "1.5": "0.375rem",
        "2": "0.5rem",
        "2.5": "0.625rem",
        "3": "0.75rem",
        "3.5": "0.875rem",
        "4": "1rem",
        "5": "1.25rem",
        "6": "1.5rem",
        "7": "1.75rem",
        "8": "2rem",
        "9": "2.25rem",
        "10": "2.5rem",
        "11": "2.75rem",
        "12": "3rem",
        "14": "3.5rem",
        "16": "4rem",
        "20": "5rem",
        "24": "6rem",
        "28": "7rem",
        "32": "8rem",
        "36": "9rem",
        "40": "10rem",
        "44": "11rem",
        "48": "12rem",
        "52": "13rem",
        "56": "14rem",
        "60": "15rem",
        "64": "16rem",
        "72": "18rem",
        "80": "20rem",
        "96": "24rem",
    }
)
"""Default spacing scale keyed by token name."""


def get_spacing_scale() -> Mapping[str, str]:
    """Return the default spacing scale."""
    return DEFAULT_SPACING_SCALE


# ═══════════════════════════════════════════════════════════════════════════
# THEME CONSTRUCTION
# ═══════════════════════════════════════════════════════════════════════════


def _merge(base: dict[str, Any], overrides: Mapping[Any, Any]) -> dict[str, Any]:
    """Deep-merge overrides into a copy of base. Keys are normalized to str."""
    merged = dict(base)
    for raw_key, value in overrides.items():
        key = str(raw_key)
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = _merge(dict(current), value)
        elif isinstance(value, Mapping):
            merged[key] = _merge({}, value)
        else:
            merged[key] = value
    return merged


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


def build_theme(overrides: Mapping[str, Any] | None = None) -> Theme:
    """
    Build an immutable theme from the defaults plus configuration overrides.

    Args:
        overrides: Nested token overrides, e.g. ``{"spacing": {"4": "18px"}}``

    Returns:
        Read-only nested mapping of design tokens
    """
    base: dict[str, Any] = {"spacing": dict(DEFAULT_SPACING_SCALE)}
    return _freeze(_merge(base, overrides or {}))


def _lookup(node: Any, parts: list[str]) -> tuple[bool, Any]:
    if not parts:
        return True, node
    if not isinstance(node, Mapping):
        return False, None

    # Token names may contain dots ("0.5"), so try the longest key first.
    for end in range(len(parts), 0, -1):
        key = ".".join(parts[:end])
        if key in node:
            found, value = _lookup(node[key], parts[end:])
            if found:
                return True, value
    return False, None


def resolve_theme_value(theme: Theme, path: str, default: Any = None) -> Any:
    """
    Resolve a dotted token path such as ``spacing.4`` or ``spacing.0.5``.

    Bracket syntax (``spacing[0.5]``) is accepted as well.

    Returns:
        The token value, or ``default`` when the path does not resolve
    """
    normalized = path.replace("[", ".").replace("]", "")
    parts = [p for p in normalized.split(".") if p != ""]
    if not parts:
        return default

    found, value = _lookup(theme, parts)
    return value if found else default


def _as_number(token: str) -> float | None:
    try:
        return float(token)
    except ValueError:
        return None


def validate_spacing_token(theme: Theme, token: str) -> ValidationResult:
    """
    Validate a spacing token against the theme's spacing scale.

    Args:
        theme: Theme to validate against
        token: Spacing token name, e.g. "4"

    Returns:
        ValidationResult with violations if the token is not on the scale
    """
    spacing = theme.get("spacing", {})
    if token in spacing:
        return ValidationResult(is_valid=True)

    violations = [f"Spacing token '{token}' is not on the theme scale"]
    value = _as_number(token)
    if value is None:
        return ValidationResult(is_valid=False, violations=violations)

    numeric = sorted(
        (n, t) for t in spacing if (n := _as_number(t)) is not None
    )
    below = [t for n, t in numeric if n < value]
    above = [t for n, t in numeric if n > value]
    nearest = below[-1:] + above[:1]

    return ValidationResult(
        is_valid=False,
        violations=violations,
        warnings=[f"Nearest tokens: {' or '.join(nearest)}"] if nearest else [],
    )

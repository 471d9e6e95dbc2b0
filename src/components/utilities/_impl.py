"""
UtilityEngine - Host for utility-class plugins.

A plugin is a plain callable that receives a PluginApi. Through it the
plugin registers prefix-matched rules (``match_components``) and reads
design tokens (``theme``). The engine resolves class names such as
``remix-search`` against the registered rules and renders CSS rules.

Key behaviors:
- Longest registered prefix is tried first
- Unknown values resolve to None, never raise
- Class names are CSS-escaped in selectors
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from src.components.design_tokens import Theme, build_theme, resolve_theme_value

from .models import ComponentFn, CssRule, MatchRule

logger = logging.getLogger(__name__)


# --- Selectors ---


NEEDS_ESCAPE = re.compile(r"[^A-Za-z0-9_-]")


def escape_class(name: str) -> str:
    """Escape a class name for use in a CSS selector.

    Every character outside ``[A-Za-z0-9_-]`` gets a backslash.
    """
    return NEEDS_ESCAPE.sub(lambda match: "\\" + match.group(0), name)


def selector_for(class_name: str) -> str:
    return f".{escape_class(class_name)}"


# --- Candidate Extraction ---


VALID_CLASS = re.compile(r"^[A-Za-z0-9_:\-/\[\]\(\)\.,%#]+$")

CLASS_ATTRIBUTE_PATTERNS = (
    re.compile(r'\bclass(?:Name)?="([^"]+)"'),
    re.compile(r"\bclass(?:Name)?='([^']+)'"),
)
CLASSNAME_EXPRESSION = re.compile(r"className=\{((?:[^{}]|\{[^{}]*\})*)\}")
QUOTED_STRING = re.compile(r"[\"']([^\"']+)[\"']")
TEMPLATE_STRING = re.compile(r"`([^`]+)`")
INTERPOLATION = re.compile(r"\$\{[^}]+\}")


def _split_classes(value: str) -> list[str]:
    return [token for token in value.split() if VALID_CLASS.match(token)]


def extract_candidates(content: str) -> list[str]:
    """
    Extract utility class candidates from markup.

    Handles:
    - class="..." / class='...'
    - className="..." / className='...'
    - className={cn("a", cond && "b")} and template literals

    Returns:
        Candidates in first-seen order, without duplicates
    """
    found: list[str] = []

    for pattern in CLASS_ATTRIBUTE_PATTERNS:
        for match in pattern.finditer(content):
            found.extend(_split_classes(match.group(1)))

    for match in CLASSNAME_EXPRESSION.finditer(content):
        expr = match.group(1)
        for quoted in QUOTED_STRING.findall(expr):
            found.extend(_split_classes(quoted))
        for template in TEMPLATE_STRING.findall(expr):
            found.extend(_split_classes(INTERPOLATION.sub(" ", template)))

    return list(dict.fromkeys(found))


# --- Plugin API ---


class PluginApi:
    """The surface a plugin sees while it is being registered."""

    def __init__(self, engine: UtilityEngine) -> None:
        self._engine = engine

    def match_components(
        self,
        components: Mapping[str, ComponentFn],
        *,
        values: Mapping[str, Any],
    ) -> None:
        """Register one prefix-matched rule per component name."""
        for prefix, fn in components.items():
            self._engine.register(MatchRule(prefix=prefix, fn=fn, values=values))

    def theme(self, path: str, default: Any = None) -> Any:
        """Look up a design token, e.g. ``theme("spacing.4")``."""
        return resolve_theme_value(self._engine.theme, path, default)


Plugin = Callable[[PluginApi], None]


# --- Engine ---


class UtilityEngine:
    """Resolves utility class names against plugin-registered rules."""

    def __init__(self, theme: Theme | None = None) -> None:
        self.theme = theme if theme is not None else build_theme()
        self._rules: dict[str, MatchRule] = {}

    def use(self, plugin: Plugin) -> None:
        """Run a plugin so it can register its rules."""
        plugin(PluginApi(self))

    def register(self, rule: MatchRule) -> None:
        if rule.prefix in self._rules:
            logger.warning("Replacing utility rule for prefix '%s'", rule.prefix)
        self._rules[rule.prefix] = rule
        logger.debug("Registered utility '%s' with %d values", rule.prefix, len(rule.values))

    @property
    def prefixes(self) -> tuple[str, ...]:
        return tuple(sorted(self._rules, key=len, reverse=True))

    def claims(self, class_name: str) -> bool:
        """True if the class name starts with a registered prefix."""
        return any(class_name.startswith(f"{prefix}-") for prefix in self._rules)

    def _match(self, class_name: str) -> tuple[MatchRule, str] | None:
        for prefix in self.prefixes:
            head = f"{prefix}-"
            if not class_name.startswith(head):
                continue
            value = class_name[len(head) :]
            rule = self._rules[prefix]
            if value in rule.values:
                return rule, value
        return None

    def resolve(self, class_name: str) -> dict[str, str] | None:
        """Return the declarations for a class name, or None if unmatched."""
        matched = self._match(class_name)
        if matched is None:
            return None
        rule, value = matched
        declarations = rule.fn(rule.values[value])
        if declarations is None:
            return None
        return dict(declarations)

    def rule_for(self, class_name: str) -> CssRule | None:
        declarations = self.resolve(class_name)
        if declarations is None:
            return None
        return CssRule(
            class_name=class_name,
            selector=selector_for(class_name),
            declarations=tuple(declarations.items()),
        )

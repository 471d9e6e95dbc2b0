"""
Utilities component - Resolve utility classes and render CSS.

Candidates come from explicit class names and from class attributes
found in markup content. Each distinct candidate is resolved once;
the rendered stylesheet lists rules in sorted class-name order.
"""

from __future__ import annotations

import logging

from ._impl import UtilityEngine, extract_candidates
from .models import CssRule, GenerateCssInput, GenerateCssOutput

logger = logging.getLogger(__name__)


def collect_candidates(inp: GenerateCssInput) -> list[str]:
    """Explicit class names plus classes found in content, de-duplicated."""
    found = list(inp.class_names)
    for content in inp.content:
        found.extend(extract_candidates(content))
    return sorted(set(found))


def render_css(rules: list[CssRule]) -> str:
    if not rules:
        return ""
    return "\n\n".join(rule.render() for rule in rules) + "\n"


def run_generate_css(
    inp: GenerateCssInput,
    *,
    engine: UtilityEngine,
) -> GenerateCssOutput:
    """
    Generate CSS for every candidate the engine can resolve.

    Args:
        inp: Class names and markup content to scan.
        engine: Utility engine with plugins registered.

    Returns:
        GenerateCssOutput with the CSS text. ``unmatched`` lists explicit
        class names that did not resolve, and content candidates that carry
        a registered prefix but name an unknown value.
    """
    explicit = set(inp.class_names)
    rules: list[CssRule] = []
    unmatched: list[str] = []

    for candidate in collect_candidates(inp):
        rule = engine.rule_for(candidate)
        if rule is not None:
            rules.append(rule)
        elif candidate in explicit or engine.claims(candidate):
            unmatched.append(candidate)

    if unmatched:
        logger.warning("Unresolved utility classes: %s", ", ".join(unmatched))
    logger.info("Generated %d utility rules", len(rules))

    return GenerateCssOutput(
        css=render_css(rules),
        matched=tuple(rule.class_name for rule in rules),
        unmatched=tuple(unmatched),
    )


def run(inp: GenerateCssInput, *, engine: UtilityEngine) -> GenerateCssOutput:
    """Main entry point for the utilities component."""
    return run_generate_css(inp, engine=engine)

"""
IconStylesheetBuilder - Wires rules, theme, catalog and plugin together.

Configuration load runs once per builder:
1. Build the theme from rules.theme overrides
2. Check the icon size token exists in the spacing scale
3. Build the icon catalog (filesystem errors propagate)
4. Register the remix plugin with a fresh utility engine

After that, ``generate`` can be called any number of times; every call
re-reads the referenced SVG files and holds no state between calls.
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.components.design_tokens import build_theme, validate_spacing_token
from src.components.icons import (
    BuildCatalogInput,
    Catalog,
    IconSourcePort,
    create_remix_plugin,
    default_icon_source,
    run_build_catalog,
)
from src.components.rules import EnvironmentPort, FileSystemPort, LoadRulesInput, run_load
from src.components.rules.adapters import default_environment, default_filesystem
from src.components.utilities import GenerateCssInput, UtilityEngine, run_generate_css
from src.rules.models import Rules

from .models import BuildStylesheetInput, StylesheetResult

logger = logging.getLogger(__name__)


class StylesheetConfigError(ValueError):
    """Raised when the icon rules cannot be loaded or are inconsistent."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Icon stylesheet configuration failed: {'; '.join(errors)}")


def resolve_icons_root(rules: Rules, base_dir: Path | None = None) -> Path:
    """Resolve icons.root; relative roots are taken from base_dir."""
    root = Path(rules.icons.root)
    if root.is_absolute() or base_dir is None:
        return root
    return base_dir / root


class IconStylesheetBuilder:
    """Holds the catalog and engine for one configuration load."""

    def __init__(
        self,
        rules: Rules,
        *,
        base_dir: Path | None = None,
        source: IconSourcePort = default_icon_source,
    ) -> None:
        self.rules = rules
        self.theme = build_theme(rules.theme.model_dump())

        size_check = validate_spacing_token(self.theme, rules.plugin.size_token)
        if not size_check.is_valid:
            raise StylesheetConfigError(size_check.violations + size_check.warnings)

        output = run_build_catalog(
            BuildCatalogInput(
                root=resolve_icons_root(rules, base_dir),
                extension=rules.icons.extension,
                default_variant_suffix=rules.icons.default_variant_suffix,
                collision_policy=rules.icons.collision_policy,
            ),
            source=source,
        )
        self.catalog: Catalog = output.catalog

        self.engine = UtilityEngine(self.theme)
        self.engine.use(
            create_remix_plugin(
                self.catalog,
                source=source,
                size_token=rules.plugin.size_token,
                prefix=rules.plugin.prefix,
            )
        )

    def generate(self, inp: BuildStylesheetInput) -> StylesheetResult:
        """Render CSS for the icon classes among the inputs."""
        output = run_generate_css(
            GenerateCssInput(class_names=inp.class_names, content=inp.content),
            engine=self.engine,
        )
        return StylesheetResult(
            css=output.css,
            matched=output.matched,
            unmatched=output.unmatched,
        )


def create_stylesheet_builder(
    rules_path: Path | str | None = None,
    *,
    fs: FileSystemPort = default_filesystem,
    env: EnvironmentPort = default_environment,
    source: IconSourcePort = default_icon_source,
) -> IconStylesheetBuilder:
    """
    Load the rules file and build a stylesheet builder from it.

    Relative icon roots are resolved against the rules file's directory.

    Raises:
        StylesheetConfigError: If the rules file is missing or invalid.
        OSError: If the icon tree cannot be listed.
    """
    loaded = run_load(LoadRulesInput(rules_path=rules_path), fs=fs, env=env)
    if not loaded.success or loaded.rules is None:
        raise StylesheetConfigError(loaded.errors)

    base_dir = loaded.source.parent if loaded.source is not None else None
    return IconStylesheetBuilder(loaded.rules, base_dir=base_dir, source=source)

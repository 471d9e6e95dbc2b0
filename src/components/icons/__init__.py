"""
Icons component - Icon catalog and mask style rules.

Discovers ``<root>/<category>/<name>.svg`` files, registers each under its
name (plus a bare alias for "-line" icons), and renders an icon as CSS
mask declarations embedding the SVG as a data URI.
"""

from .adapters import LocalIconSourceAdapter, default_icon_source
from .component import (
    AliasCollisionError,
    generate_declarations,
    run,
    run_build_catalog,
    run_generate_rule,
)
from .fc import (
    build_declarations,
    custom_property,
    default_alias,
    encode_uri_component,
    icon_name,
    normalize_svg,
    plan_catalog,
    svg_data_uri,
)
from .models import (
    AliasCollision,
    BuildCatalogInput,
    BuildCatalogOutput,
    Catalog,
    CollisionPolicy,
    GenerateRuleInput,
    GenerateRuleOutput,
    IconEntry,
    IconRuleError,
)
from .plugin import create_remix_plugin
from .ports import IconSourcePort

__all__ = [
    # Entry points
    "run",
    "run_build_catalog",
    "run_generate_rule",
    "generate_declarations",
    "create_remix_plugin",
    # Input models
    "BuildCatalogInput",
    "GenerateRuleInput",
    # Output models
    "AliasCollision",
    "BuildCatalogOutput",
    "Catalog",
    "CollisionPolicy",
    "GenerateRuleOutput",
    "IconEntry",
    "IconRuleError",
    # Errors
    "AliasCollisionError",
    # Ports / adapters
    "IconSourcePort",
    "LocalIconSourceAdapter",
    "default_icon_source",
    # Functional core
    "build_declarations",
    "custom_property",
    "default_alias",
    "encode_uri_component",
    "icon_name",
    "normalize_svg",
    "plan_catalog",
    "svg_data_uri",
]

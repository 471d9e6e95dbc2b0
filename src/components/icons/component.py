"""
Icons component - Icon catalog discovery and style rule generation.

Builds the name -> file catalog from a two-level icon tree
(``<root>/<category>/<name>.svg``) and turns a catalog entry into the
mask declarations of a utility class.

Invariants:
- Every discovered icon is catalogued under its base name
- Every "-line" icon is also catalogued under its bare name
- Catalog order is sorted, so collision outcomes are deterministic
- Filesystem errors propagate to the caller unchanged
"""

from __future__ import annotations

import logging
from pathlib import Path

from .fc import build_declarations, plan_catalog
from .models import (
    AliasCollision,
    BuildCatalogInput,
    BuildCatalogOutput,
    Catalog,
    GenerateRuleInput,
    GenerateRuleOutput,
    IconEntry,
    IconRuleError,
)
from .ports import IconSourcePort

logger = logging.getLogger(__name__)


class AliasCollisionError(Exception):
    """Raised when the catalog has colliding names under the reject policy."""

    def __init__(self, collisions: list[AliasCollision]) -> None:
        self.collisions = collisions
        super().__init__(
            f"Icon name collisions: {'; '.join(c.describe() for c in collisions)}"
        )


# --- Component Entry Points ---


def run_build_catalog(
    inp: BuildCatalogInput,
    *,
    source: IconSourcePort,
) -> BuildCatalogOutput:
    """
    Build the icon catalog from a directory tree.

    Args:
        inp: Root directory and naming options.
        source: Icon source port for listing directories.

    Returns:
        BuildCatalogOutput with the read-only catalog.

    Raises:
        OSError: If the root or a category directory cannot be listed.
        AliasCollisionError: On collisions when the policy is "reject".
    """
    root = Path(inp.root)

    listing = [
        (root / category, source.list_files(root / category))
        for category in sorted(source.list_categories(root))
    ]

    entries, collisions = plan_catalog(
        listing,
        extension=inp.extension,
        suffix=inp.default_variant_suffix,
    )

    if collisions:
        if inp.collision_policy == "reject":
            raise AliasCollisionError(collisions)
        for collision in collisions:
            logger.warning("Icon name collision, keeping later file: %s", collision.describe())

    logger.info(
        "Built icon catalog from %s: %d names across %d categories",
        root,
        len(entries),
        len(listing),
    )

    return BuildCatalogOutput(
        catalog=Catalog(entries),
        collisions=tuple(collisions),
        categories=len(listing),
    )


def generate_declarations(
    entry: IconEntry,
    *,
    size: str,
    source: IconSourcePort,
    prefix: str = "remix",
) -> dict[str, str]:
    """
    Read an icon file and build its style declarations.

    Raises:
        OSError: If the file cannot be read.
    """
    content = source.read_text(entry.location)
    logger.debug("Generating rule for %s from %s", entry.name, entry.location)
    return build_declarations(entry.name, content, size, prefix)


def run_generate_rule(
    inp: GenerateRuleInput,
    *,
    catalog: Catalog,
    source: IconSourcePort,
) -> GenerateRuleOutput:
    """
    Generate the declarations for an icon name.

    Args:
        inp: Icon name, size value and custom property prefix.
        catalog: Catalog to resolve the name against.
        source: Icon source port for reading the file.

    Returns:
        GenerateRuleOutput with declarations, or a not_found error.
    """
    entry = catalog.get(inp.name)
    if entry is None:
        return GenerateRuleOutput(
            name=inp.name,
            declarations=None,
            errors=[
                IconRuleError(
                    code="not_found",
                    message=f"Icon '{inp.name}' is not in the catalog",
                    field="name",
                )
            ],
            success=False,
        )

    declarations = generate_declarations(
        entry,
        size=inp.size,
        source=source,
        prefix=inp.prefix,
    )
    return GenerateRuleOutput(name=inp.name, declarations=declarations)


def run(
    inp: BuildCatalogInput | GenerateRuleInput,
    *,
    source: IconSourcePort,
    catalog: Catalog | None = None,
) -> BuildCatalogOutput | GenerateRuleOutput:
    """
    Main entry point for the icons component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, BuildCatalogInput):
        return run_build_catalog(inp, source=source)
    elif isinstance(inp, GenerateRuleInput):
        if catalog is None:
            raise ValueError("A catalog is required to generate icon rules")
        return run_generate_rule(inp, catalog=catalog, source=source)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

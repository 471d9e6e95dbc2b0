"""
Icons Functional Core (FC) - Pure naming and rule-building logic.

No I/O here: the component shell lists directories and reads files,
then hands names and text to these functions.

Naming:
- An icon's name is its file name without the extension.
- A name ending in the default-variant suffix ("-line") is also
  registered without the suffix, so "search" means "search-line".
- Categories and files are processed in sorted order; when two writes
  hit the same key, the later one wins and the collision is reported.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import quote

from ..models import AliasCollision, IconEntry

LINE_BREAKS = re.compile(r"\r\n|\n|\r")

# Characters left as-is by JavaScript's encodeURIComponent, minus the
# apostrophe, which would terminate the url('...') wrapper.
URI_COMPONENT_SAFE = "!*()~"

SVG_DATA_URI_PREFIX = "data:image/svg+xml;utf8,"


# ═══════════════════════════════════════════════════════════════════════════
# NAMING
# ═══════════════════════════════════════════════════════════════════════════


def icon_name(filename: str, extension: str) -> str | None:
    """Return the icon name for a file name, or None if it is not an icon."""
    if not filename.endswith(extension):
        return None
    name = filename[: -len(extension)]
    return name or None


def default_alias(name: str, suffix: str) -> str | None:
    """Return the bare alias for a default-variant name, else None."""
    if name.endswith(suffix) and len(name) > len(suffix):
        return name[: -len(suffix)]
    return None


def plan_catalog(
    listing: Iterable[tuple[Path, Iterable[str]]],
    *,
    extension: str,
    suffix: str,
) -> tuple[dict[str, IconEntry], list[AliasCollision]]:
    """
    Build catalog entries from a directory listing.

    Args:
        listing: (category directory, file names) pairs
        extension: Recognized icon extension, e.g. ".svg"
        suffix: Default-variant suffix, e.g. "-line"

    Returns:
        Entries keyed by name, and every collision seen along the way
    """
    entries: dict[str, IconEntry] = {}
    collisions: list[AliasCollision] = []

    def record(name: str, location: Path) -> None:
        previous = entries.get(name)
        if previous is not None and previous.location != location:
            collisions.append(AliasCollision(name, previous.location, location))
        entries[name] = IconEntry(name=name, location=location)

    for category_dir, filenames in sorted(listing, key=lambda item: item[0].name):
        for filename in sorted(filenames):
            name = icon_name(filename, extension)
            if name is None:
                continue
            location = category_dir / filename
            record(name, location)

            alias = default_alias(name, suffix)
            if alias is not None:
                record(alias, location)

    return entries, collisions


# ═══════════════════════════════════════════════════════════════════════════
# RULE BUILDING
# ═══════════════════════════════════════════════════════════════════════════


def normalize_svg(content: str) -> str:
    """Remove every line break so the markup fits on one line."""
    return LINE_BREAKS.sub("", content)


def encode_uri_component(text: str) -> str:
    """Percent-encode text for embedding in a URI component (UTF-8)."""
    return quote(text, safe=URI_COMPONENT_SAFE)


def svg_data_uri(content: str) -> str:
    """Wrap SVG markup in an ``image/svg+xml`` data URI."""
    return SVG_DATA_URI_PREFIX + encode_uri_component(normalize_svg(content))


def custom_property(name: str, prefix: str = "remix") -> str:
    return f"--{prefix}-{name}"


def build_declarations(
    name: str,
    content: str,
    size: str,
    prefix: str = "remix",
) -> dict[str, str]:
    """
    Build the mask declarations that paint an icon in the current color.

    Args:
        name: Icon name as requested (aliases keep their bare name)
        content: SVG markup
        size: Width and height value, e.g. "1rem"
        prefix: Custom property prefix

    Returns:
        Ordered property -> value mapping
    """
    prop = custom_property(name, prefix)
    return {
        prop: f"url('{svg_data_uri(content)}')",
        "-webkit-mask": f"var({prop})",
        "mask": f"var({prop})",
        "mask-repeat": "no-repeat",
        "background-color": "currentColor",
        "vertical-align": "middle",
        "display": "inline-block",
        "width": size,
        "height": size,
    }

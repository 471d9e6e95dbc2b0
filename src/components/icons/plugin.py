"""
Remix icon plugin for the utility engine.

Registers the ``remix`` utility: ``remix-<name>`` renders the catalog
entry ``<name>`` as a masked, current-colored inline box sized by the
theme's spacing token.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .adapters import default_icon_source
from .component import generate_declarations
from .models import Catalog, IconEntry
from .ports import IconSourcePort

if TYPE_CHECKING:
    from src.components.utilities import PluginApi


def create_remix_plugin(
    catalog: Catalog,
    *,
    source: IconSourcePort = default_icon_source,
    size_token: str = "4",
    prefix: str = "remix",
) -> Callable[[PluginApi], None]:
    """
    Build the plugin callable for a catalog.

    Args:
        catalog: Icons exposed as utility values.
        source: Icon source port used to read SVG files.
        size_token: Spacing token used for width and height.
        prefix: Utility prefix and custom property prefix.
    """

    def plugin(api: PluginApi) -> None:
        def icon_declarations(entry: IconEntry) -> dict[str, str]:
            size = api.theme(f"spacing.{size_token}")
            if size is None:
                raise KeyError(f"Spacing token '{size_token}' is not in the theme")
            return generate_declarations(entry, size=size, source=source, prefix=prefix)

        api.match_components({prefix: icon_declarations}, values=catalog)

    return plugin

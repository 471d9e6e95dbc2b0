"""
Adapters for the icons component.
"""

from .filesystem import LocalIconSourceAdapter, default_icon_source

__all__ = [
    "LocalIconSourceAdapter",
    "default_icon_source",
]

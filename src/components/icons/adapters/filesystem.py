"""
Local file system adapter for the icons component.
"""

from __future__ import annotations

import os
from pathlib import Path


class LocalIconSourceAdapter:
    """Reads icon categories and files from the local disk."""

    def list_categories(self, root: Path) -> list[str]:
        with os.scandir(root) as entries:
            return [entry.name for entry in entries if entry.is_dir()]

    def list_files(self, category_dir: Path) -> list[str]:
        with os.scandir(category_dir) as entries:
            return [entry.name for entry in entries if entry.is_file()]

    def read_text(self, path: Path) -> str:
        # Undecodable bytes become U+FFFD rather than failing the rule.
        return Path(path).read_text(encoding="utf-8", errors="replace")


default_icon_source = LocalIconSourceAdapter()

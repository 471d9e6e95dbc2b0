"""
Icons component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class IconSourcePort(Protocol):
    """Read-only access to the icon directory tree."""

    def list_categories(self, root: Path) -> list[str]:
        """Names of the immediate subdirectories of root. Raises OSError."""
        ...

    def list_files(self, category_dir: Path) -> list[str]:
        """Names of the immediate regular files of a category. Raises OSError."""
        ...

    def read_text(self, path: Path) -> str:
        """Full UTF-8 contents of an icon file. Raises OSError."""
        ...

"""
File system and environment adapters for the rules component.
"""

from __future__ import annotations

import os
from pathlib import Path


class LocalFileSystemAdapter:
    """Adapter for local file system operations."""

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file."""
        return path.read_text(encoding="utf-8")

    def exists(self, path: Path) -> bool:
        """Check if a file exists."""
        return path.is_file()


class OsEnvironmentAdapter:
    """Adapter for OS environment variables."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        return os.environ.get(key, default)


# Default adapter instances
default_filesystem = LocalFileSystemAdapter()
default_environment = OsEnvironmentAdapter()

"""
Rules component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystemPort(Protocol):
    """Port for file system operations."""

    def read_text(self, path: Path) -> str:
        """Read a text file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if a file exists."""
        ...


class EnvironmentPort(Protocol):
    """Port for environment variable access."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        ...

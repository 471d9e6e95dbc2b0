"""
Icons component input/output models.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Literal

CollisionPolicy = Literal["last_wins", "reject"]


# --- Catalog Models ---


@dataclass(frozen=True)
class IconEntry:
    """A logical icon name and the file it renders."""

    name: str
    location: Path


@dataclass(frozen=True)
class AliasCollision:
    """A catalog key that was written twice with different files."""

    name: str
    previous: Path
    current: Path

    def describe(self) -> str:
        return f"'{self.name}': {self.previous} replaced by {self.current}"


class Catalog(Mapping[str, IconEntry]):
    """Read-only mapping of icon name to IconEntry."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, IconEntry] | None = None) -> None:
        self._entries: Mapping[str, IconEntry] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, name: str) -> IconEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({len(self._entries)} icons)"

    def names(self) -> tuple[str, ...]:
        """All icon names, sorted."""
        return tuple(sorted(self._entries))


# --- Validation Error ---


@dataclass(frozen=True)
class IconRuleError:
    """Icon rule generation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class BuildCatalogInput:
    """Input for building the icon catalog."""

    root: Path | str
    extension: str = ".svg"
    default_variant_suffix: str = "-line"
    collision_policy: CollisionPolicy = "last_wins"


@dataclass(frozen=True)
class GenerateRuleInput:
    """Input for generating the style declarations of one icon."""

    name: str
    size: str
    prefix: str = "remix"


# --- Output Models ---


@dataclass(frozen=True)
class BuildCatalogOutput:
    """Output containing the built catalog."""

    catalog: Catalog
    collisions: tuple[AliasCollision, ...] = ()
    categories: int = 0


@dataclass(frozen=True)
class GenerateRuleOutput:
    """Output containing the declarations for one icon."""

    name: str
    declarations: dict[str, str] | None
    errors: list[IconRuleError] = field(default_factory=list)
    success: bool = True

"""
Core entry model for code generation.

Loaders turn catalog files into CatalogEntry lists wrapped in an
ArtifactSpec; generators consume the spec and never see the files.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ArtifactKind(Enum):
    """Shapes of source artifact the emitters know how to produce."""

    CONSTANTS_CLASS = "constants"
    TYPE_ENUM = "enum"


@dataclass
class CatalogEntry:
    """One row from a source catalog."""

    key: str
    value: str = ""
    extensions: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.key:
            raise ValueError("Catalog entry key must not be empty")
        self.extensions = list(self.extensions)

    def same_key(self, other_key: str) -> bool:
        """Case-insensitive key comparison, the media-type equality rule."""
        return self.key.lower() == other_key.lower()


@dataclass
class ArtifactSpec:
    """Target description handed to a generator."""

    package_name: str
    class_name: str
    kind: ArtifactKind
    entries: List[CatalogEntry] = field(default_factory=list)
    bundle_name: Optional[str] = None
    source_path: Optional[Path] = None

    @property
    def qualified_name(self) -> str:
        """Fully qualified class name, e.g. 'a.b.Codes'."""
        if self.package_name:
            return f"{self.package_name}.{self.class_name}"
        return self.class_name

    @property
    def package_path(self) -> Path:
        """Package name as a relative directory path."""
        if not self.package_name:
            return Path()
        return Path(*self.package_name.split("."))

    def relative_path(self, extension: str) -> Path:
        """Relative output path: <package/path>/<ClassName><extension>."""
        return self.package_path / f"{self.class_name}{extension}"


def split_class_name(full_class_name: str) -> tuple[str, str]:
    """
    Split 'a.b.C' into ('a.b', 'C').

    A name without dots yields an empty package.
    """
    parts = full_class_name.strip().split(".")
    return ".".join(parts[:-1]), parts[-1]

"""Workspace package model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from monobump.errors import ConfigurationError

MANIFEST_FILENAME = "package.json"

# Manifest fields whose keys may name other workspace packages.
DEPENDENCY_FIELDS = ("dependencies", "peerDependencies")


def is_publishable(manifest: dict[str, Any]) -> bool:
    """True for public packages: not private and published with public access.

    Works on the raw manifest so packages that are never published need not
    carry a name or version.
    """
    if manifest.get("private"):
        return False
    publish_config = manifest.get("publishConfig") or {}
    return isinstance(publish_config, dict) and publish_config.get("access") == "public"


@dataclass(eq=False)
class Package:
    """A publishable package of the workspace.

    ``name`` and ``version`` are views over the raw manifest, so a version
    bump is always reflected in the document that gets written back.

    Attributes:
        path: Package directory.
        manifest_path: Path to the package's ``package.json``.
        manifest: Raw manifest document.
        has_changed: Whether the package changed since the last release tag.
        internal_dependencies: Other workspace packages referenced from
            ``dependencies`` or ``peerDependencies``, ordered by name.
    """

    path: Path
    manifest_path: Path
    manifest: dict[str, Any] = field(repr=False)
    has_changed: bool = False
    internal_dependencies: list[Package] = field(default_factory=list, repr=False)

    @classmethod
    def from_manifest(cls, manifest_path: Path, manifest: dict[str, Any]) -> Package:
        """Create a package from a parsed manifest.

        Raises:
            ConfigurationError: If the manifest has no name or version.
        """
        for key in ("name", "version"):
            if not isinstance(manifest.get(key), str) or not manifest[key]:
                raise ConfigurationError(f"Manifest is missing '{key}'", path=manifest_path)
        return cls(path=manifest_path.parent, manifest_path=manifest_path, manifest=manifest)

    @property
    def name(self) -> str:
        return self.manifest["name"]

    @property
    def version(self) -> str:
        return self.manifest["version"]

    @version.setter
    def version(self, value: str) -> None:
        self.manifest["version"] = value

    @property
    def is_publishable(self) -> bool:
        return is_publishable(self.manifest)

    @property
    def change_paths(self) -> list[Path]:
        """Paths whose modification marks the package as changed."""
        return [self.path / "src", self.manifest_path]

    def dependency_ranges(self, dep_field: str) -> dict[str, str]:
        """Return the mapping stored under a dependency field (empty if absent)."""
        return self.manifest.get(dep_field) or {}

    def dependency_names(self) -> set[str]:
        """Names of every package listed in a dependency field."""
        names: set[str] = set()
        for dep_field in DEPENDENCY_FIELDS:
            names.update(self.dependency_ranges(dep_field))
        return names

"""Workspace discovery."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from monobump.config import ReleaseConfig, load_config
from monobump.errors import PackageNotFoundError
from monobump.workspace.discovery import ChangeDetector, discover_packages
from monobump.workspace.manifest import read_manifest, write_manifest
from monobump.workspace.package import MANIFEST_FILENAME, Package


@dataclass
class Workspace:
    """A discovered workspace.

    Attributes:
        root: Workspace root directory.
        config: Release configuration.
        manifest: Root ``package.json``.
        packages: Publishable packages ordered by name.
        last_tag: Last release tag the change status was computed against.
    """

    root: Path
    config: ReleaseConfig
    manifest: dict[str, Any]
    packages: list[Package]
    last_tag: str

    @classmethod
    async def discover(
        cls,
        root: Path | None = None,
        config: ReleaseConfig | None = None,
        *,
        detector: ChangeDetector | None = None,
    ) -> Workspace:
        """Load the workspace rooted at ``root`` (default: current directory).

        Raises:
            GitError: If the repository has no release tag yet.
            ConfigurationError: If the root manifest or a package manifest is invalid.
        """
        from monobump.git import GitChangeDetector, get_last_tag

        root = (root or Path.cwd()).resolve()
        config = config or load_config(root)
        manifest = read_manifest(root / MANIFEST_FILENAME)

        last_tag = get_last_tag(root)
        packages = await discover_packages(
            root,
            config.packages,
            detector=detector or GitChangeDetector(root),
            since=last_tag,
        )
        return cls(
            root=root,
            config=config,
            manifest=manifest,
            packages=packages,
            last_tag=last_tag,
        )

    @property
    def version(self) -> str:
        """Version of the root project."""
        return str(self.manifest.get("version", "0.0.0"))

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_FILENAME

    def get_package(self, name: str) -> Package:
        """Get a package by name.

        Raises:
            PackageNotFoundError: If no publishable package has that name.
        """
        for pkg in self.packages:
            if pkg.name == name:
                return pkg
        raise PackageNotFoundError(f"Package '{name}' not found")

    def write_root_manifest(self, version: str) -> None:
        """Set the root project version and persist the root manifest."""
        self.manifest["version"] = version
        write_manifest(self.manifest_path, self.manifest)

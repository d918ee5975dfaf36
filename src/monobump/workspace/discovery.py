"""Package discovery and change detection."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from monobump.errors import ConfigurationError
from monobump.workspace.graph import build_dependency_graph
from monobump.workspace.manifest import read_manifest
from monobump.workspace.package import Package, is_publishable

IGNORED_DIRS = frozenset({"node_modules"})

# Maximum number of concurrent change queries.
DEFAULT_CONCURRENCY = 8


class ChangeDetector(Protocol):
    """Answers whether any of a set of paths changed since a reference."""

    async def has_changed(self, since: str, paths: Sequence[Path]) -> bool: ...


def find_manifests(root: Path, patterns: Sequence[str]) -> list[Path]:
    """Find manifest files matching the glob patterns.

    Args:
        root: Workspace root.
        patterns: Glob patterns relative to ``root``.

    Returns:
        Sorted manifest paths, excluding anything inside ``node_modules``.
    """
    found: set[Path] = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            if IGNORED_DIRS.intersection(path.relative_to(root).parts):
                continue
            found.add(path)
    return sorted(found)


async def discover_packages(
    root: Path,
    patterns: Sequence[str],
    *,
    detector: ChangeDetector,
    since: str,
    concurrency: int = DEFAULT_CONCURRENCY,
) -> list[Package]:
    """Discover publishable packages and build their dependency graph.

    Private packages and packages without ``publishConfig.access: public``
    are dropped before their manifest is validated, so they may lack a
    name or version.

    Args:
        root: Workspace root.
        patterns: Manifest glob patterns.
        detector: Change detector used for ``has_changed``.
        since: Last release reference.
        concurrency: Maximum number of change queries running at once.

    Returns:
        Packages ordered by name.

    Raises:
        ConfigurationError: If two packages share a name, or a publishable
            manifest has no name or version.
    """
    packages: dict[str, Package] = {}
    for manifest_path in find_manifests(root, patterns):
        manifest = read_manifest(manifest_path)
        if not is_publishable(manifest):
            continue
        pkg = Package.from_manifest(manifest_path, manifest)
        if pkg.name in packages:
            raise ConfigurationError(
                f"Duplicate package name '{pkg.name}'", path=manifest_path
            )
        packages[pkg.name] = pkg

    ordered = sorted(packages.values(), key=lambda p: p.name)
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def check(pkg: Package) -> bool:
        async with semaphore:
            return await detector.has_changed(since, pkg.change_paths)

    changed = await asyncio.gather(*(check(pkg) for pkg in ordered))
    for pkg, has_changed in zip(ordered, changed):
        pkg.has_changed = has_changed

    build_dependency_graph(ordered)
    return ordered

"""Workspace model: packages, manifests and the dependency graph."""

from monobump.workspace.discovery import (
    DEFAULT_CONCURRENCY,
    ChangeDetector,
    discover_packages,
    find_manifests,
)
from monobump.workspace.graph import (
    build_dependency_graph,
    dependents_of,
    transitive_dependencies,
)
from monobump.workspace.manifest import read_manifest, write_manifest, write_manifests
from monobump.workspace.package import (
    DEPENDENCY_FIELDS,
    MANIFEST_FILENAME,
    Package,
    is_publishable,
)
from monobump.workspace.workspace import Workspace

__all__ = [
    "DEFAULT_CONCURRENCY",
    "DEPENDENCY_FIELDS",
    "MANIFEST_FILENAME",
    "ChangeDetector",
    "Package",
    "Workspace",
    "build_dependency_graph",
    "dependents_of",
    "discover_packages",
    "find_manifests",
    "is_publishable",
    "read_manifest",
    "transitive_dependencies",
    "write_manifest",
    "write_manifests",
]

"""Internal dependency graph between workspace packages."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from monobump.workspace.package import Package


def build_dependency_graph(packages: Sequence[Package]) -> None:
    """Populate ``internal_dependencies`` for every package.

    A package P depends on Q when Q's name is a key of P's ``dependencies``
    or ``peerDependencies``. Packages outside ``packages`` are ignored and a
    package never depends on itself.

    Args:
        packages: Discovered workspace packages.
    """
    ordered = sorted(packages, key=lambda p: p.name)
    for pkg in ordered:
        names = pkg.dependency_names()
        pkg.internal_dependencies = [
            other for other in ordered if other is not pkg and other.name in names
        ]


def dependents_of(packages: Sequence[Package]) -> dict[str, list[Package]]:
    """Reverse view of the graph: package name to the packages depending on it."""
    dependents: dict[str, list[Package]] = {pkg.name: [] for pkg in packages}
    for pkg in sorted(packages, key=lambda p: p.name):
        for dep in pkg.internal_dependencies:
            dependents.setdefault(dep.name, []).append(pkg)
    return dependents


def transitive_dependencies(package: Package) -> list[Package]:
    """All packages reachable from ``package`` through internal dependencies.

    Cycles are tolerated; ``package`` itself is only included when it is part
    of a cycle.
    """
    seen: set[str] = set()
    result: list[Package] = []
    queue = deque(package.internal_dependencies)
    while queue:
        dep = queue.popleft()
        if dep.name in seen:
            continue
        seen.add(dep.name)
        result.append(dep)
        queue.extend(dep.internal_dependencies)
    return sorted(result, key=lambda p: p.name)

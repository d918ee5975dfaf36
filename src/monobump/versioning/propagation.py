"""Version propagation across the workspace dependency graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from monobump.errors import NoChangesError
from monobump.versioning.semver import ReleaseType, diff, major
from monobump.workspace.graph import dependents_of
from monobump.workspace.package import DEPENDENCY_FIELDS, Package

# Release types that only bump the changed packages (and their neighbours).
PARTIAL_TYPES_UNSTABLE = frozenset(
    {ReleaseType.PATCH, ReleaseType.PREPATCH, ReleaseType.PRERELEASE}
)
PARTIAL_TYPES_STABLE = frozenset(
    {
        ReleaseType.MINOR,
        ReleaseType.PREMINOR,
        ReleaseType.PATCH,
        ReleaseType.PREPATCH,
        ReleaseType.PRERELEASE,
    }
)


@dataclass(frozen=True)
class VersionChange:
    """A package version assignment."""

    name: str
    old_version: str
    new_version: str


@dataclass(frozen=True)
class RangeChange:
    """A rewritten dependency range."""

    package: str
    field: str
    dependency: str
    old_range: str
    new_range: str


@dataclass
class PropagationResult:
    """Every mutation applied by :func:`propagate`."""

    new_version: str
    partial: bool
    version_changes: list[VersionChange] = field(default_factory=list)
    range_changes: list[RangeChange] = field(default_factory=list)

    @property
    def bumped(self) -> list[str]:
        return [change.name for change in self.version_changes]


def is_partial_release(old_version: str, new_version: str) -> bool:
    """Decide whether a release only bumps changed packages.

    On 0.x versions only patch-level and prerelease bumps are partial; from
    1.0.0 on, minor bumps are partial too. Everything else bumps every package.
    """
    kind = diff(old_version, new_version)
    if major(new_version) == 0:
        return kind in PARTIAL_TYPES_UNSTABLE
    return kind in PARTIAL_TYPES_STABLE


def _set_version(pkg: Package, version: str, changes: list[VersionChange]) -> None:
    changes.append(VersionChange(pkg.name, pkg.version, version))
    pkg.version = version


def propagate_changes(
    packages: Sequence[Package],
    new_version: str,
    changes: list[VersionChange] | None = None,
) -> list[VersionChange]:
    """Bump the changed packages and every package connected to them.

    Starts from the changed packages not yet at ``new_version`` and walks
    the internal dependency graph in both directions. Packages already at
    ``new_version`` are neither bumped nor walked through.

    Args:
        packages: Discovered packages (mutated in place).
        new_version: Target version.
        changes: List the version assignments are appended to.

    Returns:
        The version assignments.
    """
    changes = [] if changes is None else changes
    dependents = dependents_of(packages)

    seeds = [p for p in packages if p.has_changed and p.version != new_version]
    for pkg in seeds:
        _set_version(pkg, new_version, changes)

    queue = deque(seeds)
    visited = {pkg.name for pkg in seeds}
    while queue:
        pkg = queue.popleft()
        for neighbour in [*pkg.internal_dependencies, *dependents.get(pkg.name, [])]:
            if neighbour.name in visited or neighbour.version == new_version:
                continue
            visited.add(neighbour.name)
            _set_version(neighbour, new_version, changes)
            queue.append(neighbour)
    return changes


def update_dependency_ranges(packages: Sequence[Package]) -> list[RangeChange]:
    """Pin every internal dependency range to ``^<current version>``.

    Keys that do not name a package in ``packages`` (external or private
    packages) are left untouched. Running this twice changes nothing the
    second time.

    Returns:
        The ranges that were actually modified.
    """
    by_name = {pkg.name: pkg for pkg in packages}
    changes: list[RangeChange] = []

    for pkg in packages:
        for dep_field in DEPENDENCY_FIELDS:
            ranges = pkg.manifest.get(dep_field)
            if not ranges:
                continue
            for dep_name, old_range in ranges.items():
                target = by_name.get(dep_name)
                if target is None:
                    continue
                new_range = f"^{target.version}"
                if old_range != new_range:
                    ranges[dep_name] = new_range
                    changes.append(
                        RangeChange(pkg.name, dep_field, dep_name, old_range, new_range)
                    )
    return changes


def propagate(
    packages: Sequence[Package],
    old_version: str,
    new_version: str,
) -> PropagationResult:
    """Apply a new version to the workspace packages in memory.

    A full release sets every package to ``new_version``. A partial release
    bumps the changed packages, then every package connected to a bumped
    one through the internal dependency graph, in either direction. In both
    cases internal dependency ranges are rewritten afterwards. Nothing is
    written to disk.

    Args:
        packages: Discovered packages (mutated in place).
        old_version: Current root project version.
        new_version: Version chosen for the release.

    Returns:
        The recorded mutations.

    Raises:
        NoChangesError: If the release is partial and no package changed. No
            package is mutated in that case.
    """
    partial = is_partial_release(old_version, new_version)
    result = PropagationResult(new_version=new_version, partial=partial)

    if partial:
        if not any(pkg.has_changed for pkg in packages):
            raise NoChangesError("No package has changed since last release.")
        propagate_changes(packages, new_version, result.version_changes)
    else:
        for pkg in packages:
            _set_version(pkg, new_version, result.version_changes)

    result.range_changes = update_dependency_ranges(packages)
    return result

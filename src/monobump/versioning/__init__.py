"""Semantic versioning, version selection and propagation."""

from monobump.versioning.propagation import (
    PropagationResult,
    RangeChange,
    VersionChange,
    is_partial_release,
    propagate,
    propagate_changes,
    update_dependency_ranges,
)
from monobump.versioning.selection import (
    CUSTOM,
    enumerate_candidates,
    resolve_choice,
    validate_custom_version,
)
from monobump.versioning.semver import (
    ReleaseType,
    diff,
    increment,
    is_valid,
    normalize,
    parse_version,
)

__all__ = [
    "CUSTOM",
    "PropagationResult",
    "RangeChange",
    "ReleaseType",
    "VersionChange",
    "diff",
    "enumerate_candidates",
    "increment",
    "is_partial_release",
    "is_valid",
    "normalize",
    "parse_version",
    "propagate",
    "propagate_changes",
    "resolve_choice",
    "update_dependency_ranges",
    "validate_custom_version",
]

"""Candidate versions offered to the operator and resolution of their choice."""

from __future__ import annotations

from monobump.errors import ValidationError
from monobump.versioning.semver import (
    ReleaseType,
    increment,
    is_valid,
    normalize,
    prerelease_ids,
    prerelease_tag,
)

# Sentinel choice for a version typed by the operator.
CUSTOM = "custom"

STABLE_TYPES = (ReleaseType.PATCH, ReleaseType.MINOR, ReleaseType.MAJOR)
PRERELEASE_TYPES = (
    ReleaseType.PREPATCH,
    ReleaseType.PREMINOR,
    ReleaseType.PREMAJOR,
    ReleaseType.PRERELEASE,
)


def enumerate_candidates(old_version: str) -> dict[ReleaseType, str]:
    """List the next versions reachable from ``old_version``.

    Patch, minor and major are always offered. When the current version is
    a prerelease, the four ``pre*`` increments are offered as well, staying
    on the current prerelease identifier.

    Args:
        old_version: Current version of the project.

    Returns:
        Mapping of release type to candidate version, in display order.

    Raises:
        ValidationError: If ``old_version`` is not a valid version.
    """
    types: tuple[ReleaseType, ...] = STABLE_TYPES
    if prerelease_ids(old_version):
        types = STABLE_TYPES + PRERELEASE_TYPES

    identifier = prerelease_tag(old_version)
    return {release: increment(old_version, release, identifier) for release in types}


def validate_custom_version(value: str) -> bool | str:
    """Validate a custom version typed by the operator.

    Returns:
        True if valid, otherwise the message to show before re-prompting.
    """
    if value is None or value.strip() == "":
        return "Version is required"
    if not is_valid(value):
        return "Invalid version"
    return True


def resolve_choice(
    candidates: dict[ReleaseType, str],
    choice: ReleaseType | str,
    custom: str | None = None,
) -> str:
    """Resolve the operator's choice to a concrete version.

    Args:
        candidates: Output of :func:`enumerate_candidates`.
        choice: A release type (or its name), or :data:`CUSTOM`.
        custom: The typed version when ``choice`` is :data:`CUSTOM`.

    Returns:
        The new version.

    Raises:
        ValidationError: If the custom version is empty or invalid, or the
            choice is not one of the candidates.
    """
    if choice == CUSTOM:
        verdict = validate_custom_version(custom or "")
        if verdict is not True:
            raise ValidationError(str(verdict))
        return normalize(custom or "")

    try:
        release = ReleaseType(choice)
    except ValueError as e:
        raise ValidationError(f"Unknown release type: {choice!r}") from e

    if release not in candidates:
        raise ValidationError(f"Release type '{release.value}' is not available")
    return candidates[release]

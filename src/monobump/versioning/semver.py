"""Semantic version increments and comparisons.

Increments follow the npm ``semver`` rules so that candidate versions and
release classification match what the JavaScript tooling of the workspace
expects. Parsing and ordering are delegated to the ``semver`` package.
"""

from __future__ import annotations

from enum import Enum

import semver

from monobump.errors import ValidationError

PrereleaseIds = list[int | str]


class ReleaseType(str, Enum):
    """Kind of version increment."""

    MAJOR = "major"
    PREMAJOR = "premajor"
    MINOR = "minor"
    PREMINOR = "preminor"
    PATCH = "patch"
    PREPATCH = "prepatch"
    PRERELEASE = "prerelease"


def parse_version(version: str) -> semver.Version:
    """Parse a version string, tolerating a single leading ``v`` or ``=``.

    Raises:
        ValidationError: If the string is not a valid semantic version.
    """
    cleaned = version.strip()
    if cleaned[:1] in ("v", "="):
        cleaned = cleaned[1:]
    try:
        return semver.Version.parse(cleaned)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"Invalid version: {version!r}") from e


def is_valid(version: str) -> bool:
    """Check whether ``version`` is a valid semantic version."""
    try:
        parse_version(version)
    except ValidationError:
        return False
    return True


def normalize(version: str) -> str:
    """Return the canonical form of a version (no ``v`` prefix)."""
    return str(parse_version(version))


def major(version: str) -> int:
    return parse_version(version).major


def prerelease_ids(version: str) -> PrereleaseIds:
    """Split the prerelease part into identifiers, numeric ones as ints."""
    return _split(parse_version(version).prerelease)


def prerelease_tag(version: str) -> str | None:
    """Return the leading non-numeric prerelease identifier (e.g. ``beta``)."""
    ids = prerelease_ids(version)
    if ids and isinstance(ids[0], str):
        return ids[0]
    return None


def _split(prerelease: str | None) -> PrereleaseIds:
    if not prerelease:
        return []
    return [int(part) if part.isdigit() else part for part in prerelease.split(".")]


def _join(ids: PrereleaseIds) -> str | None:
    return ".".join(str(part) for part in ids) or None


def _bump_prerelease(ids: PrereleaseIds, identifier: str | None) -> PrereleaseIds:
    if not ids:
        ids = [0]
    else:
        ids = list(ids)
        for index in range(len(ids) - 1, -1, -1):
            if isinstance(ids[index], int):
                ids[index] += 1
                break
        else:
            ids.append(0)

    if identifier:
        # 1.2.0-beta.1 with "beta" stays on the beta line, any other
        # identifier restarts at <identifier>.0
        if ids[0] != identifier or not (len(ids) > 1 and isinstance(ids[1], int)):
            ids = [identifier, 0]
    return ids


def increment(
    version: str,
    release: ReleaseType | str,
    identifier: str | None = None,
) -> str:
    """Increment a version.

    Args:
        version: Current version.
        release: Kind of increment.
        identifier: Prerelease identifier for the ``pre*`` increments (e.g. ``beta``).

    Returns:
        The incremented version, without build metadata.

    Raises:
        ValidationError: If ``version`` or ``release`` is invalid.

    Examples:
        >>> increment("1.2.3", "minor")
        '1.3.0'
        >>> increment("1.3.0-beta.1", "patch")
        '1.3.0'
        >>> increment("1.3.0-beta.1", "prerelease", "beta")
        '1.3.0-beta.2'
    """
    try:
        release = ReleaseType(release)
    except ValueError as e:
        raise ValidationError(f"Invalid release type: {release!r}") from e

    current = parse_version(version)
    maj, mnr, pat = current.major, current.minor, current.patch
    pre = _split(current.prerelease)

    if release is ReleaseType.PREMAJOR:
        maj, mnr, pat = maj + 1, 0, 0
        pre = _bump_prerelease([], identifier)
    elif release is ReleaseType.PREMINOR:
        mnr, pat = mnr + 1, 0
        pre = _bump_prerelease([], identifier)
    elif release is ReleaseType.PREPATCH:
        pat += 1
        pre = _bump_prerelease([], identifier)
    elif release is ReleaseType.PRERELEASE:
        if not pre:
            pat += 1
        pre = _bump_prerelease(pre, identifier)
    elif release is ReleaseType.MAJOR:
        # 2.0.0-rc.1 -> 2.0.0
        if mnr != 0 or pat != 0 or not pre:
            maj += 1
        mnr, pat, pre = 0, 0, []
    elif release is ReleaseType.MINOR:
        if pat != 0 or not pre:
            mnr += 1
        pat, pre = 0, []
    else:
        if not pre:
            pat += 1
        pre = []

    return str(semver.Version(maj, mnr, pat, prerelease=_join(pre)))


def diff(old: str, new: str) -> ReleaseType | None:
    """Classify the difference between two versions.

    Returns:
        The release type separating the versions, or None if they are equal.
    """
    v1 = parse_version(old)
    v2 = parse_version(new)
    comparison = v1.compare(v2)
    if comparison == 0:
        return None

    high, low = (v1, v2) if comparison > 0 else (v2, v1)
    high_has_pre = bool(high.prerelease)
    low_has_pre = bool(low.prerelease)

    if low_has_pre and not high_has_pre:
        # Going from a prerelease to its final release
        if not low.patch and not low.minor:
            return ReleaseType.MAJOR
        if (low.major, low.minor, low.patch) == (high.major, high.minor, high.patch):
            if low.minor and not low.patch:
                return ReleaseType.MINOR
            return ReleaseType.PATCH

    prefix = "pre" if high_has_pre else ""
    if v1.major != v2.major:
        return ReleaseType(prefix + "major")
    if v1.minor != v2.minor:
        return ReleaseType(prefix + "minor")
    if v1.patch != v2.patch:
        return ReleaseType(prefix + "patch")
    return ReleaseType.PRERELEASE

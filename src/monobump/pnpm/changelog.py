"""Changelog generation through conventional-changelog."""

from __future__ import annotations

from pathlib import Path

from monobump.pnpm.client import run_pnpm


def changelog_args(preset: str, changelog_file: str = "CHANGELOG.md") -> list[str]:
    """Arguments prepending the latest release section to the changelog."""
    return [
        "exec",
        "conventional-changelog",
        "-i",
        changelog_file,
        "-s",
        "-r",
        "1",
        "-p",
        preset,
    ]


def generate_changelog(
    cwd: Path,
    *,
    preset: str = "angular",
    changelog_file: str = "CHANGELOG.md",
) -> Path:
    """Regenerate the changelog in place.

    Args:
        cwd: Workspace root.
        preset: conventional-changelog preset.
        changelog_file: Changelog path relative to ``cwd``.

    Returns:
        Path of the changelog file.
    """
    run_pnpm(changelog_args(preset, changelog_file), cwd=cwd)
    return cwd / changelog_file

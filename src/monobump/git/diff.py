"""Git diff operations."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from monobump.git.repo import run_git_command_async


async def has_changes_since(
    root: Path,
    since: str,
    paths: Sequence[Path],
) -> bool:
    """Check whether any of ``paths`` differs from a git reference.

    The comparison is against the working tree, so committed, staged and
    unstaged modifications all count.

    Args:
        root: Repository root.
        since: Git reference (usually the last release tag).
        paths: Files or directories to restrict the diff to.

    Returns:
        True if ``git diff`` reports any difference.

    Raises:
        GitError: If the reference does not exist.
    """
    _, stdout, _ = await run_git_command_async(
        ["diff", "--name-only", since, "--", *(str(p) for p in paths)],
        cwd=root,
    )
    return bool(stdout.strip())


class GitChangeDetector:
    """Change detector backed by ``git diff``."""

    def __init__(self, root: Path) -> None:
        self.root = root

    async def has_changed(self, since: str, paths: Sequence[Path]) -> bool:
        return await has_changes_since(self.root, since, paths)

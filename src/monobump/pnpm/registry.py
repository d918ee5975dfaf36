"""Lock file refresh and registry publishing."""

from __future__ import annotations

from pathlib import Path

from monobump.errors import CommandError, PublishError
from monobump.pnpm.client import run_pnpm


def install(cwd: Path) -> None:
    """Run ``pnpm install`` so the lock file follows the new versions."""
    run_pnpm(["install"], cwd=cwd)


def publish_args(dist_tag: str | None = None) -> list[str]:
    """Build the arguments of the recursive publish command.

    Args:
        dist_tag: Optional registry dist-tag.

    Returns:
        pnpm arguments (without 'pnpm').
    """
    args = ["publish", "-r", "--no-git-checks"]
    if dist_tag:
        args.extend(["--tag", dist_tag])
    return args


def publish(cwd: Path, *, dist_tag: str | None = None) -> None:
    """Publish every workspace package to the registry.

    Args:
        cwd: Workspace root.
        dist_tag: Optional registry dist-tag.

    Raises:
        PublishError: If pnpm fails.
    """
    try:
        run_pnpm(publish_args(dist_tag), cwd=cwd)
    except CommandError as e:
        raise PublishError(e.message, command=e.command, exit_code=e.exit_code) from e

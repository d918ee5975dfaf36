"""Git repository abstraction."""

from __future__ import annotations

import asyncio
import re
import subprocess
from pathlib import Path

from monobump.errors import GitError


def run_git_command(
    args: list[str],
    cwd: Path | None = None,
    *,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a git command synchronously.

    Args:
        args: Git command arguments (without 'git').
        cwd: Working directory.
        check: Raise on non-zero exit code.

    Returns:
        Completed process result.

    Raises:
        GitError: If command fails and check is True.
    """
    cmd = ["git"] + args

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if check and result.returncode != 0:
            raise GitError(
                result.stderr.strip() or f"Command failed with exit code {result.returncode}",
                command=" ".join(cmd),
            )
        return result
    except FileNotFoundError as e:
        raise GitError("Git is not installed") from e


async def run_git_command_async(
    args: list[str],
    cwd: Path | None = None,
    *,
    check: bool = True,
) -> tuple[int, str, str]:
    """Run a git command asynchronously.

    Args:
        args: Git command arguments (without 'git').
        cwd: Working directory.
        check: Raise on non-zero exit code.

    Returns:
        Tuple of (exit_code, stdout, stderr).

    Raises:
        GitError: If command fails and check is True.
    """
    cmd = ["git"] + args

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout_bytes, stderr_bytes = await process.communicate()
        stdout = stdout_bytes.decode("utf-8", errors="replace")
        stderr = stderr_bytes.decode("utf-8", errors="replace")

        if check and process.returncode != 0:
            raise GitError(
                stderr.strip() or f"Command failed with exit code {process.returncode}",
                command=" ".join(cmd),
            )

        return process.returncode or 0, stdout, stderr
    except FileNotFoundError as e:
        raise GitError("Git is not installed") from e


def is_clean(cwd: Path | None = None) -> bool:
    """Check if the working directory is clean (no uncommitted changes).

    Args:
        cwd: Working directory.

    Returns:
        True if working directory is clean.
    """
    result = run_git_command(["status", "--porcelain"], cwd=cwd)
    return not result.stdout.strip()


def get_current_branch(cwd: Path | None = None) -> str:
    """Get the current git branch name (empty on a detached HEAD)."""
    result = run_git_command(["branch", "--show-current"], cwd=cwd)
    return result.stdout.strip()


def get_remote_status(remote: str = "origin", cwd: Path | None = None) -> str:
    """Return the output of ``git remote show <remote>``."""
    result = run_git_command(["remote", "show", remote], cwd=cwd)
    return result.stdout


def is_branch_outdated(branch: str, remote_status: str) -> bool:
    """Check whether ``git remote show`` reports the branch as behind its remote.

    Args:
        branch: Local branch name.
        remote_status: Output of :func:`get_remote_status`.

    Returns:
        True if the branch is fast-forwardable or out of date.
    """
    pattern = re.compile(
        rf"\W{re.escape(branch)}\W.*(?:fast-forwardable|local out of date)",
        re.IGNORECASE,
    )
    return pattern.search(remote_status) is not None


def get_last_tag(cwd: Path | None = None) -> str:
    """Get the most recent tag reachable from HEAD.

    Raises:
        GitError: If the repository has no tag yet.
    """
    result = run_git_command(["describe", "--tags", "--abbrev=0"], cwd=cwd)
    return result.stdout.strip()


def commit_all(message: str, cwd: Path | None = None) -> str:
    """Stage everything and commit.

    Args:
        message: Commit message.
        cwd: Working directory.

    Returns:
        SHA of the new commit.
    """
    run_git_command(["add", "."], cwd=cwd)
    run_git_command(["commit", "-m", message], cwd=cwd)
    result = run_git_command(["rev-parse", "HEAD"], cwd=cwd)
    return result.stdout.strip()


def create_tag(name: str, cwd: Path | None = None) -> None:
    """Create a lightweight tag at HEAD."""
    run_git_command(["tag", name], cwd=cwd)


def push(cwd: Path | None = None, *, tags: bool = False) -> None:
    """Push the current branch, or all tags when ``tags`` is set."""
    run_git_command(["push", "--tags"] if tags else ["push"], cwd=cwd)

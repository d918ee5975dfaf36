"""Git operations."""

from monobump.git.diff import GitChangeDetector, has_changes_since
from monobump.git.repo import (
    commit_all,
    create_tag,
    get_current_branch,
    get_last_tag,
    get_remote_status,
    is_branch_outdated,
    is_clean,
    push,
    run_git_command,
    run_git_command_async,
)

__all__ = [
    "GitChangeDetector",
    "commit_all",
    "create_tag",
    "get_current_branch",
    "get_last_tag",
    "get_remote_status",
    "has_changes_since",
    "is_branch_outdated",
    "is_clean",
    "push",
    "run_git_command",
    "run_git_command_async",
]

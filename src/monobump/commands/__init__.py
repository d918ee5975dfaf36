"""monobump commands."""

from monobump.commands.base import Command, CommandContext, SyncCommand
from monobump.commands.changelog import (
    ChangelogCommand,
    ChangelogResult,
    handle_changelog_command,
)
from monobump.commands.list import (
    ListCommand,
    ListResult,
    PackageInfo,
    handle_list_command,
    list_packages,
)
from monobump.commands.release import (
    ReleaseCommand,
    ReleaseOptions,
    ReleaseOutcome,
    ReleaseResult,
    handle_release_command,
)

__all__ = [
    # Base
    "Command",
    "SyncCommand",
    "CommandContext",
    # Release
    "ReleaseCommand",
    "ReleaseOptions",
    "ReleaseOutcome",
    "ReleaseResult",
    "handle_release_command",
    # Changelog
    "ChangelogCommand",
    "ChangelogResult",
    "handle_changelog_command",
    # List
    "ListCommand",
    "ListResult",
    "PackageInfo",
    "list_packages",
    "handle_list_command",
]

"""pnpm operations."""

from monobump.pnpm.changelog import changelog_args, generate_changelog
from monobump.pnpm.client import format_command, run_pnpm
from monobump.pnpm.registry import install, publish, publish_args

__all__ = [
    "changelog_args",
    "format_command",
    "generate_changelog",
    "install",
    "publish",
    "publish_args",
    "run_pnpm",
]

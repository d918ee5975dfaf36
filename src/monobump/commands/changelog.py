"""Changelog command implementation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from monobump.commands.base import CommandContext, SyncCommand
from monobump.errors import CommandError


@dataclass
class ChangelogResult:
    """Result of changelog command."""

    path: Path
    preset: str


class ChangelogCommand(SyncCommand[ChangelogResult]):
    """Regenerate the changelog from conventional commits without releasing."""

    def __init__(self, context: CommandContext, preset: str | None = None) -> None:
        super().__init__(context)
        self.preset = preset or context.config.preset

    def execute(self) -> ChangelogResult:
        from monobump.pnpm import generate_changelog

        path = generate_changelog(
            self.context.root,
            preset=self.preset,
            changelog_file=self.context.config.changelog_file,
        )
        return ChangelogResult(path=path, preset=self.preset)


def handle_changelog_command(context: CommandContext, *, preset: str | None = None) -> None:
    """Handle changelog command."""
    try:
        result = ChangelogCommand(context, preset).execute()
    except CommandError as e:
        context.error_console.print(f"[red]Changelog generation failed:[/red] {e.message}")
        raise typer.Exit(1) from e

    context.console.print(
        f"[green]Updated {result.path.name}[/green] [dim](preset: {result.preset})[/dim]"
    )

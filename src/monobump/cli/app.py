"""monobump CLI application."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from monobump.commands.base import CommandContext
from monobump.errors import MonobumpError


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from monobump import __version__

        print(f"monobump {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="monobump",
    help="Version, publish and tag a pnpm monorepo",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def _app_callback(
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", "-V", help="Show version and exit", callback=version_callback),
    ] = False,
) -> None:
    """Version, publish and tag a pnpm monorepo."""
    pass


console = Console()
error_console = Console(stderr=True)

CwdOption = Annotated[
    Path | None,
    typer.Option("--cwd", help="Workspace root (defaults to the current directory)"),
]


def get_context(cwd: Path | None = None) -> CommandContext:
    """Build the command context for the workspace at ``cwd``."""
    from monobump.config import load_config

    root = (cwd or Path.cwd()).resolve()
    try:
        config = load_config(root)
    except MonobumpError as e:
        error_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from e
    return CommandContext(root=root, config=config, console=console, error_console=error_console)


@app.command()
def release(
    preset: Annotated[
        str | None,
        typer.Option("--preset", "-p", help="conventional-changelog preset"),
    ] = None,
    tag: Annotated[
        str | None,
        typer.Option("--tag", "-t", help="Registry dist-tag to publish under"),
    ] = None,
    branch: Annotated[
        str | None,
        typer.Option("--branch", "-b", help="Branch the release must be made from"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show publish, commit and tag commands instead of running them"),
    ] = False,
    cwd: CwdOption = None,
) -> None:
    """Bump versions, update the changelog, publish, commit and tag."""
    from monobump.commands import handle_release_command

    root = (cwd or Path.cwd()).resolve()
    asyncio.run(
        handle_release_command(
            root,
            console=console,
            error_console=error_console,
            preset=preset,
            dist_tag=tag,
            expected_branch=branch,
            dry_run=dry_run or None,
        )
    )


@app.command()
def changelog(
    preset: Annotated[
        str | None,
        typer.Option("--preset", "-p", help="conventional-changelog preset"),
    ] = None,
    cwd: CwdOption = None,
) -> None:
    """Generate the changelog from conventional commits."""
    from monobump.commands import handle_changelog_command

    handle_changelog_command(get_context(cwd), preset=preset)


@app.command("list")
def list_cmd(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
    cwd: CwdOption = None,
) -> None:
    """List publishable packages and whether they changed since the last tag."""
    from monobump.commands import handle_list_command

    asyncio.run(handle_list_command(get_context(cwd), json_output=json_output))


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()

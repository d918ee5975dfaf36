"""List command implementation."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass

import typer
from rich.console import Console
from rich.table import Table

from monobump.commands.base import Command, CommandContext
from monobump.errors import MonobumpError
from monobump.workspace import ChangeDetector, Workspace, dependents_of


@dataclass
class PackageInfo:
    """Information about a package for display."""

    name: str
    version: str
    path: str
    changed: bool
    dependencies: list[str]
    dependents: list[str]


@dataclass
class ListResult:
    """Result of list command."""

    last_tag: str
    packages: list[PackageInfo]


class ListCommand(Command[ListResult]):
    """List publishable packages with their change status since the last tag."""

    def __init__(self, context: CommandContext, *, detector: ChangeDetector | None = None) -> None:
        super().__init__(context)
        self.detector = detector

    async def execute(self) -> ListResult:
        workspace = await Workspace.discover(
            self.context.root, self.context.config, detector=self.detector
        )
        dependents = dependents_of(workspace.packages)

        infos = [
            PackageInfo(
                name=pkg.name,
                version=pkg.version,
                path=str(pkg.path.relative_to(workspace.root)),
                changed=pkg.has_changed,
                dependencies=[d.name for d in pkg.internal_dependencies],
                dependents=[d.name for d in dependents.get(pkg.name, [])],
            )
            for pkg in workspace.packages
        ]
        return ListResult(last_tag=workspace.last_tag, packages=infos)


async def list_packages(
    context: CommandContext,
    *,
    detector: ChangeDetector | None = None,
) -> ListResult:
    """Convenience function to list packages."""
    return await ListCommand(context, detector=detector).execute()


async def handle_list_command(
    context: CommandContext,
    *,
    json_output: bool = False,
) -> None:
    """Handle list command."""
    console: Console = context.console
    try:
        result = await list_packages(context)
    except MonobumpError as e:
        context.error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    if json_output:
        console.print_json(json.dumps([asdict(p) for p in result.packages]))
        return

    table = Table(title=f"Packages (since {result.last_tag})")
    table.add_column("Name", style="bold")
    table.add_column("Version")
    table.add_column("Path", style="dim")
    table.add_column("Changed")
    table.add_column("Dependencies")
    table.add_column("Dependents")

    for pkg in result.packages:
        table.add_row(
            pkg.name,
            pkg.version,
            pkg.path,
            "[green]yes[/green]" if pkg.changed else "no",
            ", ".join(pkg.dependencies) or "-",
            ", ".join(pkg.dependents) or "-",
        )

    console.print(table)

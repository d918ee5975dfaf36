"""Release command implementation."""

from __future__ import annotations

import shlex
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console

from monobump.commands.base import Command, CommandContext
from monobump.config import ReleaseConfig
from monobump.errors import CommandError, GitError, MonobumpError, NoChangesError
from monobump.versioning import PropagationResult, propagate
from monobump.workspace import ChangeDetector, Workspace, write_manifests


class ReleaseOutcome(Enum):
    """How a release run ended."""

    SUCCESS = "success"
    PRECONDITION_FAILED = "precondition_failed"
    CANCELLED = "cancelled"
    NO_CHANGES = "no_changes"
    FAILED = "failed"


@dataclass
class ReleaseResult:
    """Result of release command."""

    outcome: ReleaseOutcome
    reason: str | None = None
    old_version: str | None = None
    new_version: str | None = None
    propagation: PropagationResult | None = None
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return self.outcome is ReleaseOutcome.SUCCESS

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1


@dataclass
class ReleaseOptions:
    """Options for release command. None keeps the configured value."""

    preset: str | None = None
    dist_tag: str | None = None
    expected_branch: str | None = None
    dry_run: bool | None = None


VersionSelector = Callable[[str], "str | None"]
Confirmation = Callable[[], bool]


def _default_select_version(old_version: str) -> str | None:
    from monobump.interactive import select_new_version

    return select_new_version(old_version)


def _default_confirm_changelog() -> bool:
    from monobump.interactive import confirm_changelog

    return confirm_changelog()


class ReleaseCommand(Command[ReleaseResult]):
    """Bump, publish, commit and tag every publishable workspace package."""

    def __init__(
        self,
        context: CommandContext,
        options: ReleaseOptions | None = None,
        *,
        select_version: VersionSelector | None = None,
        confirm_changelog: Confirmation | None = None,
        detector: ChangeDetector | None = None,
    ) -> None:
        super().__init__(context)
        self.options = options or ReleaseOptions()
        self.config: ReleaseConfig = context.config.merged(
            preset=self.options.preset,
            dist_tag=self.options.dist_tag,
            expected_branch=self.options.expected_branch,
            dry_run=self.options.dry_run,
        )
        self.select_version = select_version or _default_select_version
        self.confirm_changelog = confirm_changelog or _default_confirm_changelog
        self.detector = detector

    @property
    def root(self) -> Path:
        return self.context.root

    @property
    def is_dry_run(self) -> bool:
        return self.config.dry_run

    def _step(self, message: str) -> None:
        self.console.print(f"[blue]{message}[/blue]")

    def _will_execute(self, *commands: list[str]) -> None:
        self.console.print("[dim](Dry run) Will execute:[/dim]")
        for cmd in commands:
            self.console.print(shlex.join(cmd), markup=False, highlight=False)

    def check_preconditions(self) -> str | None:
        """Check the working tree and branch.

        Returns:
            The reason the release cannot start, or None if it can.
        """
        from monobump.git import get_current_branch, get_remote_status, is_branch_outdated, is_clean

        if not is_clean(self.root):
            return "Git repo isn't clean."

        branch = self.config.expected_branch
        if not branch:
            self.console.print(
                "[yellow]It's recommended to specify an expected branch "
                "for the release with the --branch option.[/yellow]"
            )
            return None

        current = get_current_branch(self.root)
        if current != branch:
            return f'You should be on branch "{branch}" but are on "{current}"'

        if is_branch_outdated(branch, get_remote_status(self.config.remote, self.root)):
            return "Git branch is not in sync with remote"

        return None

    def report_propagation(self, propagation: PropagationResult) -> None:
        for change in propagation.version_changes:
            self.console.print(f"[yellow]{change.name} => {change.new_version}[/yellow]")
        for change in propagation.range_changes:
            self.console.print(
                f"[yellow]{change.package} -> {change.field} -> "
                f"{change.dependency}@{change.new_range}[/yellow]"
            )

    def _publish(self) -> None:
        from monobump.pnpm import publish, publish_args

        self._step("Publishing packages...")
        if self.is_dry_run:
            self._will_execute(["pnpm", *publish_args(self.config.dist_tag)])
            return
        publish(self.root, dist_tag=self.config.dist_tag)

    def _commit(self, message: str) -> None:
        from monobump.git import commit_all, push

        self._step("Creating commit...")
        if self.is_dry_run:
            self._will_execute(["git", "add", "."], ["git", "commit", "-m", message], ["git", "push"])
            return
        commit_all(message, self.root)
        push(self.root)

    def _tag(self, tag: str) -> None:
        from monobump.git import create_tag, push

        self._step("Creating git tag...")
        if self.is_dry_run:
            self._will_execute(["git", "tag", tag], ["git", "push", "--tags"])
            return
        create_tag(tag, self.root)
        push(self.root, tags=True)

    async def execute(self) -> ReleaseResult:
        """Execute the release command."""
        from monobump.pnpm import generate_changelog, install

        dry_run = self.is_dry_run
        try:
            reason = self.check_preconditions()
        except GitError as e:
            return ReleaseResult(ReleaseOutcome.FAILED, reason=str(e), dry_run=dry_run)
        if reason:
            return ReleaseResult(ReleaseOutcome.PRECONDITION_FAILED, reason=reason, dry_run=dry_run)

        try:
            workspace = await Workspace.discover(self.root, self.config, detector=self.detector)
        except MonobumpError as e:
            return ReleaseResult(ReleaseOutcome.FAILED, reason=str(e), dry_run=dry_run)

        old_version = workspace.version
        self.console.print(f"[blue]Selecting new version from [bold]{old_version}[/bold][/blue]")
        try:
            new_version = self.select_version(old_version)
        except MonobumpError as e:
            return ReleaseResult(
                ReleaseOutcome.FAILED,
                reason=str(e),
                old_version=old_version,
                dry_run=dry_run,
            )
        if new_version is None:
            return ReleaseResult(
                ReleaseOutcome.CANCELLED,
                reason="Aborted!",
                old_version=old_version,
                dry_run=dry_run,
            )

        result = ReleaseResult(
            ReleaseOutcome.SUCCESS,
            old_version=old_version,
            new_version=new_version,
            dry_run=dry_run,
        )

        self._step("Updating packages version...")
        try:
            result.propagation = propagate(workspace.packages, old_version, new_version)
        except NoChangesError as e:
            result.outcome, result.reason = ReleaseOutcome.NO_CHANGES, e.message
            return result
        except MonobumpError as e:
            result.outcome, result.reason = ReleaseOutcome.FAILED, str(e)
            return result
        self.report_propagation(result.propagation)

        # All in-memory mutations succeeded, persist them in one go
        write_manifests(workspace.packages)
        self._step("Updating root package.json version...")
        workspace.write_root_manifest(new_version)

        tag = self.config.tag_for(new_version)
        try:
            self._step("Updating lock file...")
            install(self.root)

            self._step("Updating changelog...")
            generate_changelog(
                self.root,
                preset=self.config.preset,
                changelog_file=self.config.changelog_file,
            )
            if not self.confirm_changelog():
                result.outcome, result.reason = ReleaseOutcome.CANCELLED, "Aborted!"
                return result

            self._publish()
            self._commit(tag)
            self._tag(tag)
        except (CommandError, GitError) as e:
            result.outcome, result.reason = ReleaseOutcome.FAILED, str(e)
            return result

        return result


async def release(
    root: Path,
    *,
    config: ReleaseConfig | None = None,
    preset: str | None = None,
    dist_tag: str | None = None,
    expected_branch: str | None = None,
    dry_run: bool | None = None,
    console: Console | None = None,
    select_version: VersionSelector | None = None,
    confirm_changelog: Confirmation | None = None,
    detector: ChangeDetector | None = None,
) -> ReleaseResult:
    """Convenience function to run a release."""
    from monobump.config import load_config

    context = CommandContext(root=root, config=config or load_config(root))
    if console is not None:
        context.console = console
    options = ReleaseOptions(
        preset=preset,
        dist_tag=dist_tag,
        expected_branch=expected_branch,
        dry_run=dry_run,
    )
    cmd = ReleaseCommand(
        context,
        options,
        select_version=select_version,
        confirm_changelog=confirm_changelog,
        detector=detector,
    )
    return await cmd.execute()


async def handle_release_command(
    root: Path,
    *,
    console: Console,
    error_console: Console,
    preset: str | None = None,
    dist_tag: str | None = None,
    expected_branch: str | None = None,
    dry_run: bool | None = None,
) -> None:
    """Handle the release command from the CLI and translate the outcome to an exit status."""
    from monobump.config import load_config

    try:
        config = load_config(root)
    except MonobumpError as e:
        error_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from e

    result = await release(
        root,
        config=config,
        preset=preset,
        dist_tag=dist_tag,
        expected_branch=expected_branch,
        dry_run=dry_run,
        console=console,
    )

    if result.success:
        console.print(f"[green]Successfully released {result.new_version}![/green]")
        if result.dry_run:
            console.print(
                "[yellow]Dry run. No packages were published. "
                "No commits and tags were pushed.[/yellow]"
            )
        return

    error_console.print(f"[red]{result.reason}[/red]")
    raise typer.Exit(result.exit_code)

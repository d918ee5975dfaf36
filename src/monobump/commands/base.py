"""Base command infrastructure."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, TypeVar

from rich.console import Console

from monobump.config import ReleaseConfig

TResult = TypeVar("TResult")


@dataclass
class CommandContext:
    """Context passed to all commands.

    Attributes:
        root: Workspace root directory.
        config: Release configuration (file values merged with CLI overrides).
        console: Console for progress output.
        error_console: Console for errors.
        verbose: If True, show detailed output.
    """

    root: Path
    config: ReleaseConfig = field(default_factory=ReleaseConfig)
    console: Console = field(default_factory=Console)
    error_console: Console = field(default_factory=lambda: Console(stderr=True))
    verbose: bool = False

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run


class Command(ABC, Generic[TResult]):
    """Base class for all monobump commands.

    Commands encapsulate the logic for a specific operation.
    They receive a context and return a result.
    """

    def __init__(self, context: CommandContext) -> None:
        """Initialize command.

        Args:
            context: Command context.
        """
        self.context = context
        self.console = context.console

    @abstractmethod
    async def execute(self) -> TResult:
        """Execute the command.

        Returns:
            Command-specific result.
        """
        ...


class SyncCommand(ABC, Generic[TResult]):
    """Base class for synchronous commands."""

    def __init__(self, context: CommandContext) -> None:
        self.context = context
        self.console = context.console

    @abstractmethod
    def execute(self) -> TResult:
        """Execute the command synchronously.

        Returns:
            Command-specific result.
        """
        ...

"""Exception hierarchy for monobump."""

from __future__ import annotations

from pathlib import Path


class MonobumpError(Exception):
    """Base class for all monobump errors.

    Attributes:
        message: Human readable error message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(MonobumpError):
    """Invalid configuration or workspace layout."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)
        self.path = path


class GitError(MonobumpError):
    """A git command failed."""

    def __init__(self, message: str, *, command: str | None = None) -> None:
        super().__init__(message)
        self.command = command

    def __str__(self) -> str:
        if self.command:
            return f"{self.message} (command: {self.command})"
        return self.message


class CommandError(MonobumpError):
    """An external command exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        exit_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.exit_code = exit_code


class PublishError(CommandError):
    """Publishing packages to the registry failed."""


class ReleaseError(MonobumpError):
    """The release cannot proceed."""


class NoChangesError(ReleaseError):
    """A partial release was requested but no package changed."""


class ValidationError(MonobumpError):
    """Invalid operator input, such as a malformed version string."""


class PackageNotFoundError(MonobumpError):
    """No workspace package has the requested name."""

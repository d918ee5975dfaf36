"""Pydantic schema for monobump.yaml."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReleaseConfig(BaseModel):
    """Release configuration.

    Attributes:
        preset: conventional-changelog preset used to render the changelog.
        dist_tag: Registry dist-tag to publish under (e.g. ``next``).
        expected_branch: Branch releases must be cut from. Unset disables
            the branch and remote checks.
        dry_run: Report publish, commit and tag commands instead of running them.
        packages: Glob patterns (relative to the workspace root) locating
            package manifests.
        changelog_file: Changelog path relative to the workspace root.
        tag_prefix: Prefix for the release tag and commit message.
        remote: Remote checked for a stale release branch.
    """

    model_config = ConfigDict(extra="forbid")

    preset: str = "angular"
    dist_tag: str | None = None
    expected_branch: str | None = None
    dry_run: bool = False
    packages: list[str] = Field(default_factory=lambda: ["packages/**/package.json"])
    changelog_file: str = "CHANGELOG.md"
    tag_prefix: str = "v"
    remote: str = "origin"

    @field_validator("packages")
    @classmethod
    def _packages_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one package pattern is required")
        return value

    def tag_for(self, version: str) -> str:
        """Return the git tag (and commit message) for a version."""
        return f"{self.tag_prefix}{version}"

    def merged(self, **overrides: object) -> ReleaseConfig:
        """Return a copy with every non-None override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return self.model_copy(update=updates)

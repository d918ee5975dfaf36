"""Shared test fixtures for monobump tests."""

from __future__ import annotations

import json
import subprocess
import tempfile
from collections.abc import Generator, Sequence
from pathlib import Path
from typing import Any

import pytest


def write_json(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n")


def read_json(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text())


def run_git(args: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    """Run git command."""
    return subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )


class FakeChangeDetector:
    """Change detector reporting a fixed set of package directories as changed."""

    def __init__(self, changed_dirs: Sequence[str] = ()) -> None:
        self.changed_dirs = set(changed_dirs)
        self.calls: list[tuple[str, list[Path]]] = []

    async def has_changed(self, since: str, paths: Sequence[Path]) -> bool:
        self.calls.append((since, list(paths)))
        return any(p.parent.name in self.changed_dirs for p in paths)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def workspace_dir(temp_dir: Path) -> Path:
    """Create a sample pnpm workspace.

    Publishable: @demo/core, @demo/utils (depends on core, peer on vue),
    @demo/app (depends on utils). Not publishable: @demo/internal (private)
    and @demo/docs (no public publishConfig). A package.json inside
    node_modules must never be picked up.
    """
    public = {"access": "public"}

    write_json(
        temp_dir / "package.json",
        {"name": "demo-monorepo", "version": "1.0.0", "private": True},
    )
    (temp_dir / "pnpm-workspace.yaml").write_text("packages:\n  - packages/*\n")

    packages = temp_dir / "packages"

    write_json(
        packages / "core" / "package.json",
        {
            "name": "@demo/core",
            "version": "1.0.0",
            "publishConfig": public,
            "dependencies": {"@demo/internal": "^1.0.0"},
        },
    )
    (packages / "core" / "src").mkdir()
    (packages / "core" / "src" / "index.js").write_text("export const core = 1\n")

    write_json(
        packages / "utils" / "package.json",
        {
            "name": "@demo/utils",
            "version": "1.0.0",
            "publishConfig": public,
            "dependencies": {"@demo/core": "^1.0.0", "lodash": "^4.17.21"},
            "peerDependencies": {"vue": "^3.0.0"},
        },
    )
    (packages / "utils" / "src").mkdir()
    (packages / "utils" / "src" / "index.js").write_text("export const utils = 1\n")

    write_json(
        packages / "app" / "package.json",
        {
            "name": "@demo/app",
            "version": "1.0.0",
            "publishConfig": public,
            "dependencies": {"@demo/utils": "^1.0.0"},
        },
    )
    (packages / "app" / "src").mkdir()
    (packages / "app" / "src" / "index.js").write_text("export const app = 1\n")

    write_json(
        packages / "internal" / "package.json",
        {"name": "@demo/internal", "version": "1.0.0", "private": True, "publishConfig": public},
    )
    write_json(
        packages / "docs" / "package.json",
        {"name": "@demo/docs", "version": "1.0.0"},
    )
    write_json(
        packages / "core" / "node_modules" / "left-pad" / "package.json",
        {"name": "left-pad", "version": "1.3.0", "publishConfig": public},
    )

    return temp_dir


@pytest.fixture
def git_workspace(workspace_dir: Path) -> Path:
    """Create a workspace with git initialized and a v1.0.0 release tag."""
    run_git(["init", "-q"], workspace_dir)
    run_git(["config", "user.email", "test@test.com"], workspace_dir)
    run_git(["config", "user.name", "Test"], workspace_dir)
    run_git(["config", "commit.gpgsign", "false"], workspace_dir)
    run_git(["symbolic-ref", "HEAD", "refs/heads/main"], workspace_dir)
    run_git(["add", "-A"], workspace_dir)
    run_git(["commit", "-q", "-m", "Initial commit"], workspace_dir)
    run_git(["tag", "v1.0.0"], workspace_dir)
    return workspace_dir


@pytest.fixture
def make_detector() -> type[FakeChangeDetector]:
    """Factory for change detectors: ``make_detector(["core"])``."""
    return FakeChangeDetector


@pytest.fixture
def make_package():
    """Factory building in-memory packages (graph not built)."""
    from monobump.workspace import Package

    def _make(
        name: str,
        version: str = "1.0.0",
        *,
        deps: dict[str, str] | None = None,
        peer: dict[str, str] | None = None,
        changed: bool = False,
    ) -> Package:
        manifest: dict[str, Any] = {
            "name": name,
            "version": version,
            "publishConfig": {"access": "public"},
        }
        if deps is not None:
            manifest["dependencies"] = deps
        if peer is not None:
            manifest["peerDependencies"] = peer
        pkg = Package.from_manifest(Path("/ws/packages") / name / "package.json", manifest)
        pkg.has_changed = changed
        return pkg

    return _make

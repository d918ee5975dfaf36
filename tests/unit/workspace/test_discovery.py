"""Tests for package discovery."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from monobump.errors import ConfigurationError
from monobump.workspace import discover_packages, find_manifests

PATTERNS = ["packages/**/package.json"]


class TestFindManifests:
    """Tests for find_manifests()."""

    def test_skips_node_modules(self, workspace_dir: Path) -> None:
        found = find_manifests(workspace_dir, PATTERNS)
        rel = [p.relative_to(workspace_dir).as_posix() for p in found]
        assert rel == [
            "packages/app/package.json",
            "packages/core/package.json",
            "packages/docs/package.json",
            "packages/internal/package.json",
            "packages/utils/package.json",
        ]

    def test_overlapping_patterns_deduplicated(self, workspace_dir: Path) -> None:
        found = find_manifests(workspace_dir, [*PATTERNS, "packages/*/package.json"])
        assert len(found) == len(set(found)) == 5

    def test_no_match(self, temp_dir: Path) -> None:
        assert find_manifests(temp_dir, PATTERNS) == []


class TestDiscoverPackages:
    """Tests for discover_packages()."""

    async def test_only_publishable(self, workspace_dir: Path, make_detector) -> None:
        packages = await discover_packages(
            workspace_dir, PATTERNS, detector=make_detector(), since="v1.0.0"
        )
        assert [p.name for p in packages] == ["@demo/app", "@demo/core", "@demo/utils"]

    async def test_graph_ignores_excluded_packages(
        self, workspace_dir: Path, make_detector
    ) -> None:
        packages = await discover_packages(
            workspace_dir, PATTERNS, detector=make_detector(), since="v1.0.0"
        )
        by_name = {p.name: p for p in packages}

        assert by_name["@demo/core"].internal_dependencies == []
        assert [p.name for p in by_name["@demo/utils"].internal_dependencies] == ["@demo/core"]
        assert [p.name for p in by_name["@demo/app"].internal_dependencies] == ["@demo/utils"]

    async def test_change_status(self, workspace_dir: Path, make_detector) -> None:
        detector = make_detector(["utils"])
        packages = await discover_packages(
            workspace_dir, PATTERNS, detector=detector, since="v1.0.0"
        )

        assert {p.name: p.has_changed for p in packages} == {
            "@demo/app": False,
            "@demo/core": False,
            "@demo/utils": True,
        }
        assert len(detector.calls) == 3
        since, paths = detector.calls[0]
        assert since == "v1.0.0"
        assert paths == [
            workspace_dir / "packages" / "app" / "src",
            workspace_dir / "packages" / "app" / "package.json",
        ]

    async def test_duplicate_names(self, workspace_dir: Path, make_detector) -> None:
        dup = workspace_dir / "packages" / "core-copy" / "package.json"
        dup.parent.mkdir()
        dup.write_text(
            json.dumps(
                {"name": "@demo/core", "version": "1.0.0", "publishConfig": {"access": "public"}}
            )
        )
        with pytest.raises(ConfigurationError, match="Duplicate package name"):
            await discover_packages(
                workspace_dir, PATTERNS, detector=make_detector(), since="v1.0.0"
            )

    async def test_invalid_manifest(self, workspace_dir: Path, make_detector) -> None:
        (workspace_dir / "packages" / "docs" / "package.json").write_text("{")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            await discover_packages(
                workspace_dir, PATTERNS, detector=make_detector(), since="v1.0.0"
            )

    async def test_unpublished_manifests_need_no_version(
        self, workspace_dir: Path, make_detector
    ) -> None:
        playground = workspace_dir / "packages" / "playground" / "package.json"
        playground.parent.mkdir()
        playground.write_text(json.dumps({"name": "playground", "private": True}))
        example = workspace_dir / "packages" / "example" / "package.json"
        example.parent.mkdir()
        example.write_text(json.dumps({"description": "no name, no version"}))

        packages = await discover_packages(
            workspace_dir, PATTERNS, detector=make_detector(), since="v1.0.0"
        )

        assert [p.name for p in packages] == ["@demo/app", "@demo/core", "@demo/utils"]

    async def test_publishable_manifest_without_version(
        self, workspace_dir: Path, make_detector
    ) -> None:
        broken = workspace_dir / "packages" / "broken" / "package.json"
        broken.parent.mkdir()
        broken.write_text(json.dumps({"name": "broken", "publishConfig": {"access": "public"}}))

        with pytest.raises(ConfigurationError, match="missing 'version'"):
            await discover_packages(
                workspace_dir, PATTERNS, detector=make_detector(), since="v1.0.0"
            )

    async def test_change_queries_are_bounded(self, workspace_dir: Path) -> None:
        for index in range(6):
            path = workspace_dir / "packages" / f"extra{index}" / "package.json"
            path.parent.mkdir()
            path.write_text(
                json.dumps(
                    {
                        "name": f"extra{index}",
                        "version": "1.0.0",
                        "publishConfig": {"access": "public"},
                    }
                )
            )

        class CountingDetector:
            def __init__(self) -> None:
                self.running = 0
                self.peak = 0
                self.calls = 0

            async def has_changed(self, since, paths) -> bool:
                self.running += 1
                self.calls += 1
                self.peak = max(self.peak, self.running)
                await asyncio.sleep(0.01)
                self.running -= 1
                return False

        detector = CountingDetector()
        packages = await discover_packages(
            workspace_dir, PATTERNS, detector=detector, since="v1.0.0", concurrency=2
        )

        assert len(packages) == 9
        assert detector.calls == 9
        assert detector.peak == 2

"""Tests for the internal dependency graph."""

from __future__ import annotations

from monobump.workspace import build_dependency_graph, dependents_of, transitive_dependencies


def names(packages) -> list[str]:
    return [p.name for p in packages]


class TestBuildDependencyGraph:
    """Tests for build_dependency_graph()."""

    def test_links_internal_packages(self, make_package) -> None:
        core = make_package("core")
        ui = make_package("ui", deps={"core": "^1.0.0", "lodash": "^4.0.0"})
        build_dependency_graph([ui, core])

        assert names(ui.internal_dependencies) == ["core"]
        assert core.internal_dependencies == []

    def test_peer_dependencies_count(self, make_package) -> None:
        core = make_package("core")
        plugin = make_package("plugin", peer={"core": "^1.0.0"})
        build_dependency_graph([core, plugin])
        assert names(plugin.internal_dependencies) == ["core"]

    def test_ordered_by_name(self, make_package) -> None:
        app = make_package("app", deps={"zeta": "^1.0.0", "alpha": "^1.0.0", "mid": "^1.0.0"})
        packages = [app, make_package("zeta"), make_package("mid"), make_package("alpha")]
        build_dependency_graph(packages)
        assert names(app.internal_dependencies) == ["alpha", "mid", "zeta"]

    def test_self_reference_ignored(self, make_package) -> None:
        core = make_package("core", peer={"core": "^1.0.0"})
        build_dependency_graph([core])
        assert core.internal_dependencies == []

    def test_rebuild_replaces_edges(self, make_package) -> None:
        core = make_package("core")
        ui = make_package("ui", deps={"core": "^1.0.0"})
        build_dependency_graph([core, ui])
        del ui.manifest["dependencies"]
        build_dependency_graph([core, ui])
        assert ui.internal_dependencies == []


class TestDependentsOf:
    """Tests for dependents_of()."""

    def test_reverse_edges(self, make_package) -> None:
        core = make_package("core")
        ui = make_package("ui", deps={"core": "^1.0.0"})
        cli = make_package("cli", deps={"core": "^1.0.0", "ui": "^1.0.0"})
        packages = [core, ui, cli]
        build_dependency_graph(packages)

        dependents = dependents_of(packages)

        assert names(dependents["core"]) == ["cli", "ui"]
        assert names(dependents["ui"]) == ["cli"]
        assert dependents["cli"] == []


class TestTransitiveDependencies:
    """Tests for transitive_dependencies()."""

    def test_chain(self, make_package) -> None:
        a = make_package("a", deps={"b": "^1.0.0"})
        b = make_package("b", deps={"c": "^1.0.0"})
        c = make_package("c")
        build_dependency_graph([a, b, c])

        assert names(transitive_dependencies(a)) == ["b", "c"]
        assert names(transitive_dependencies(c)) == []

    def test_cycle(self, make_package) -> None:
        a = make_package("a", deps={"b": "^1.0.0"})
        b = make_package("b", peer={"a": "^1.0.0"})
        build_dependency_graph([a, b])

        assert names(transitive_dependencies(a)) == ["a", "b"]

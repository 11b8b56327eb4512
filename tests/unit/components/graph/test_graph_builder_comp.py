"""Unit tests for the copy-on-write project graph builder."""

import pytest

from domgraph.components.graph.graph_builder_comp import ProjectGraphBuilder
from domgraph.helpers.dto.graph_dto import Dependency, FileRecord
from tests.factories import edge_targets, make_graph, make_node


@pytest.fixture
def small_graph():
    return make_graph(
        make_node("a", "libs/a", files={"src/a.ts": ["b", "lodash"]}),
        make_node("b", "libs/b"),
        make_node("c", "libs/c", implicit=["a"]),
    )


class TestNodes:
    """Tests for node operations."""

    @pytest.mark.unit
    def test_builder_copies_nodes(self, small_graph) -> None:
        builder = ProjectGraphBuilder(small_graph)

        builder.get_node("a").files[0].deps.append("c")
        builder.remove_node("b")

        assert small_graph.nodes["a"].files[0].deps == ["b", "lodash"]
        assert "b" in small_graph.nodes

    @pytest.mark.unit
    def test_add_node_rejects_duplicates(self, small_graph) -> None:
        builder = ProjectGraphBuilder(small_graph)

        with pytest.raises(ValueError, match="already exists"):
            builder.add_node(make_node("a", "libs/other"))

    @pytest.mark.unit
    def test_replace_node_requires_existing(self, small_graph) -> None:
        builder = ProjectGraphBuilder(small_graph)

        with pytest.raises(KeyError):
            builder.replace_node(make_node("zzz", "libs/zzz"))

    @pytest.mark.unit
    def test_remove_node_drops_its_edges(self, small_graph) -> None:
        builder = ProjectGraphBuilder(small_graph)

        builder.remove_node("a")
        result = builder.get_updated_graph()

        assert "a" not in result.dependencies
        assert edge_targets(result, "c") == set()

    @pytest.mark.unit
    def test_iter_nodes_allows_removal_while_iterating(self, small_graph) -> None:
        builder = ProjectGraphBuilder(small_graph)

        for node in builder.iter_nodes():
            builder.remove_node(node.name)

        assert builder.get_updated_graph().nodes == {}


class TestEdges:
    """Tests for edge registration and redirection."""

    @pytest.mark.unit
    def test_add_implicit_dependency(self, small_graph) -> None:
        builder = ProjectGraphBuilder(small_graph)

        builder.add_implicit_dependency("b", "c")

        assert Dependency("b", "c", "implicit") in builder.get_updated_graph().dependencies["b"]

    @pytest.mark.unit
    def test_add_dependency_requires_known_source(self, small_graph) -> None:
        builder = ProjectGraphBuilder(small_graph)

        with pytest.raises(ValueError, match="does not exist"):
            builder.add_static_dependency("missing", "a")

    @pytest.mark.unit
    def test_self_and_duplicate_edges_are_ignored(self, small_graph) -> None:
        builder = ProjectGraphBuilder(small_graph)

        builder.add_static_dependency("b", "b")
        builder.add_static_dependency("b", "a")
        builder.add_implicit_dependency("b", "a")

        assert builder.get_updated_graph().dependencies["b"] == [Dependency("b", "a", "static")]

    @pytest.mark.unit
    def test_redirect_merges_and_drops_self_loops(self) -> None:
        graph = make_graph(
            make_node("x-ui", "libs/x/ui", files={"a.ts": ["x-util", "y-util"]}),
            make_node("x-util", "libs/x/util", files={"b.ts": ["y-util"]}),
            make_node("y-util", "libs/y/util"),
        )
        builder = ProjectGraphBuilder(graph)

        builder.redirect_dependencies({"x-ui": "x", "x-util": "x", "y-util": "y"})

        assert builder._dependencies == {"x": [Dependency("x", "y", "static")]}

    @pytest.mark.unit
    def test_add_file_dependencies(self) -> None:
        """File deps on graph nodes become static edges; external names and self deps do not."""
        graph = make_graph(make_node("a", "libs/a", files={"x.ts": ["b", "lodash", "a"]}), make_node("b", "libs/b"))
        graph.dependencies = {}
        builder = ProjectGraphBuilder(graph)

        builder.add_file_dependencies()
        builder.redirect_dependencies({"b": "c"})

        assert builder._dependencies == {"a": [Dependency("a", "c", "static")]}


class TestGetUpdatedGraph:
    """Tests for get_updated_graph()."""

    @pytest.mark.unit
    def test_file_deps_produce_static_edges_to_known_nodes(self) -> None:
        graph = make_graph(make_node("a", "libs/a"), make_node("b", "libs/b"))
        builder = ProjectGraphBuilder(graph)
        builder.get_node("a").files.append(FileRecord(file="libs/a/x.ts", deps=["b", "lodash", "a"]))

        result = builder.get_updated_graph()

        assert result.dependencies["a"] == [Dependency("a", "b", "static")]

    @pytest.mark.unit
    def test_explicit_edges_take_precedence(self, small_graph) -> None:
        builder = ProjectGraphBuilder(small_graph)
        builder.add_implicit_dependency("a", "b")

        result = builder.get_updated_graph()

        assert result.dependencies["a"] == [Dependency("a", "b", "static")]

    @pytest.mark.unit
    def test_every_node_has_an_edge_list(self, small_graph) -> None:
        result = ProjectGraphBuilder(small_graph).get_updated_graph()

        assert set(result.dependencies) == {"a", "b", "c"}
        assert result.dependencies["b"] == []

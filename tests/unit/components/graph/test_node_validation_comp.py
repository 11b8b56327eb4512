"""Unit tests for project graph validation."""

import pytest

from domgraph.components.graph.node_validation_comp import validate_project_graph
from domgraph.helpers.exceptions import MalformedNodeError
from tests.factories import make_graph, make_node


class TestValidateProjectGraph:
    """Tests for validate_project_graph()."""

    @pytest.mark.unit
    def test_accepts_well_formed_graph(self, layered_graph) -> None:
        validate_project_graph(layered_graph)

    @pytest.mark.unit
    def test_accepts_empty_root(self) -> None:
        """Projects at the workspace root have an empty root path."""
        validate_project_graph(make_graph(make_node("workspace", "")))

    @pytest.mark.unit
    def test_missing_root(self) -> None:
        graph = make_graph(make_node("a", "libs/a"))
        graph.nodes["a"].root = None

        with pytest.raises(MalformedNodeError, match="root") as exc_info:
            validate_project_graph(graph)

        assert exc_info.value.node_name == "a"

    @pytest.mark.unit
    def test_missing_files(self) -> None:
        graph = make_graph(make_node("a", "libs/a"))
        graph.nodes["a"].files = None

        with pytest.raises(MalformedNodeError, match="files"):
            validate_project_graph(graph)

"""Unit tests for layer library removal."""

import pytest

from domgraph.components.graph.graph_builder_comp import ProjectGraphBuilder
from domgraph.components.graph.library_pruner_comp import remove_layer_libraries
from tests.factories import edge_targets, make_graph, make_node


class TestRemoveLayerLibraries:
    """Tests for remove_layer_libraries()."""

    @pytest.mark.unit
    def test_removes_layer_nodes(self) -> None:
        graph = make_graph(
            make_node("orders-ui", "libs/orders/ui"),
            make_node("orders", "libs/orders"),
            make_node("design-system", "libs/design-system"),
        )
        builder = ProjectGraphBuilder(graph)

        remove_layer_libraries(builder, {"orders-ui": "orders"})

        assert not builder.has_node("orders-ui")
        assert builder.has_node("orders")
        assert builder.has_node("design-system")

    @pytest.mark.unit
    def test_rehomes_edges_on_domain(self) -> None:
        """Edges into and out of a layer library move to its domain."""
        graph = make_graph(
            make_node("orders-ui", "libs/orders/ui", files={"src/a.ts": ["orders-util", "shared-util"]}),
            make_node("orders-util", "libs/orders/util"),
            make_node("shared-util", "libs/shared/util"),
            make_node("orders", "libs/orders"),
            make_node("shared", "libs/shared"),
            make_node("design-system", "libs/design-system", files={"src/t.ts": ["orders-ui"]}),
        )
        builder = ProjectGraphBuilder(graph)

        remove_layer_libraries(builder, {"orders-ui": "orders", "orders-util": "orders", "shared-util": "shared"})
        result = builder.get_updated_graph()

        assert edge_targets(result, "orders") == {"shared"}
        assert edge_targets(result, "design-system") == {"orders"}

    @pytest.mark.unit
    def test_keeps_layer_named_like_its_domain(self) -> None:
        graph = make_graph(make_node("cart", "libs/cart"), make_node("cart-ui", "libs/cart/ui"))
        builder = ProjectGraphBuilder(graph)

        remove_layer_libraries(builder, {"cart": "cart", "cart-ui": "cart"})

        assert builder.has_node("cart")
        assert not builder.has_node("cart-ui")

    @pytest.mark.unit
    def test_file_deps_without_edges_are_rehomed(self) -> None:
        graph = make_graph(
            make_node("orders-ui", "libs/orders/ui"),
            make_node("orders", "libs/orders"),
            make_node("design-system", "libs/design-system", files={"src/t.ts": ["orders-ui"]}),
        )
        graph.dependencies = {}
        builder = ProjectGraphBuilder(graph)

        remove_layer_libraries(builder, {"orders-ui": "orders"})

        assert edge_targets(builder.get_updated_graph(), "design-system") == {"orders"}

"""Process project graph workflow - collapse layer libraries into domain nodes."""

from __future__ import annotations

import logging

from domgraph.components.graph.app_dependency_comp import convert_app_layer_dependencies
from domgraph.components.graph.domain_aggregator_comp import aggregate_domain_nodes
from domgraph.components.graph.domain_installer_comp import install_domain_nodes
from domgraph.components.graph.e2e_converter_comp import convert_e2e_nodes
from domgraph.components.graph.graph_builder_comp import ProjectGraphBuilder
from domgraph.components.graph.layer_classifier_comp import build_layer_domain_map
from domgraph.components.graph.library_pruner_comp import remove_layer_libraries
from domgraph.components.graph.node_validation_comp import validate_project_graph
from domgraph.helpers.dto.config_dto import TransformConfig
from domgraph.helpers.dto.graph_dto import ProjectGraph

logger = logging.getLogger(__name__)


def process_project_graph(graph: ProjectGraph, config: TransformConfig | None = None) -> ProjectGraph:
    """Rewrite a layered project graph into a domain graph.

    Steps, in this order:
    1. Validate every node (nothing is rewritten if one is malformed)
    2. Classify layer libraries once; the resulting map drives every later step
    3. Aggregate layer files into domain nodes and install them
    4. Convert e2e projects, moving implicit deps onto graph edges
    5. Remove layer libraries, re-homing their edges on the domains
    6. Rewrite application file deps
    7. Rebuild edges and return the new graph

    Aggregation must read the layer libraries before they are removed; the
    later steps only use the map, so they do not depend on the live graph.

    The input graph is not modified.

    Args:
        graph: Project graph from static analysis
        config: Layer vocabulary and e2e prefix (defaults when None)

    Returns:
        New graph with one node per domain and no layer libraries

    Raises:
        MalformedNodeError: If a node has no root or no file list
        DomainNameCollisionError: If a domain name is taken by another project

    """
    config = config or TransformConfig()
    validate_project_graph(graph)

    layer_domain_map = build_layer_domain_map(graph, config)
    builder = ProjectGraphBuilder(graph)

    domain_nodes = aggregate_domain_nodes(graph, layer_domain_map)
    install_domain_nodes(builder, domain_nodes, layer_domain_map)

    e2e_names = convert_e2e_nodes(builder, layer_domain_map, config)
    remove_layer_libraries(builder, layer_domain_map)
    app_count = convert_app_layer_dependencies(builder, layer_domain_map)

    result = builder.get_updated_graph()

    logger.info(
        "[process_project_graph] %d layer libraries -> %d domains, %d e2e projects, %d apps; %d -> %d nodes",
        len(layer_domain_map),
        len(domain_nodes),
        len(e2e_names),
        app_count,
        len(graph.nodes),
        len(result.nodes),
    )
    return result

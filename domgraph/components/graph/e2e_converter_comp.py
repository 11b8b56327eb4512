"""End-to-end test project normalization."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domgraph.components.graph.dependency_rewriter_comp import rewrite_dependencies
from domgraph.helpers.dto.graph_dto import E2E

if TYPE_CHECKING:
    from domgraph.components.graph.graph_builder_comp import ProjectGraphBuilder
    from domgraph.helpers.dto.config_dto import TransformConfig

logger = logging.getLogger(__name__)


def convert_e2e_nodes(
    builder: ProjectGraphBuilder,
    layer_domain_map: dict[str, str],
    config: TransformConfig,
) -> list[str]:
    """
    Turn e2e-prefixed projects into e2e nodes with explicit implicit edges.

    Implicit dependencies are redirected to domains, removed from the node
    data and registered on the graph instead, so consumers reading only
    edges still see them. Domain nodes are never converted, even when
    their name carries the e2e prefix.

    Returns:
        Names of the converted projects
    """
    domain_names = set(layer_domain_map.values())
    converted: list[str] = []
    for node in builder.iter_nodes():
        if not node.name.startswith(config.e2e_prefix) or node.name in domain_names:
            continue

        node.type = E2E
        node.project_type = "application"
        domain_deps = rewrite_dependencies(node.implicit_dependencies, layer_domain_map)
        node.implicit_dependencies = []
        for dep in domain_deps:
            builder.add_implicit_dependency(node.name, dep)

        logger.debug("Converted %s: implicit deps %s", node.name, domain_deps)
        converted.append(node.name)

    return converted

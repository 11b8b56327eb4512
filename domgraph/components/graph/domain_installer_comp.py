"""Installation of aggregated domain nodes into the graph builder."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domgraph.helpers.exceptions import DomainNameCollisionError

if TYPE_CHECKING:
    from domgraph.components.graph.graph_builder_comp import ProjectGraphBuilder
    from domgraph.helpers.dto.graph_dto import ProjectNode

logger = logging.getLogger(__name__)


def install_domain_nodes(
    builder: ProjectGraphBuilder,
    domain_nodes: dict[str, ProjectNode],
    layer_domain_map: dict[str, str],
) -> None:
    """
    Add every domain node to the builder.

    A domain may reuse the name of a layer library (that library is about to
    be removed) but never the name of a project that survives the transform.

    Raises:
        DomainNameCollisionError: If a domain name is taken by a non-layer project
    """
    for domain_name in domain_nodes:
        if builder.has_node(domain_name) and domain_name not in layer_domain_map:
            raise DomainNameCollisionError(domain_name)

    for domain_name, domain_node in domain_nodes.items():
        if builder.has_node(domain_name):
            # Layer library named like its own domain; the domain takes its place
            builder.replace_node(domain_node)
        else:
            builder.add_node(domain_node)

    logger.debug("Installed %d domain nodes", len(domain_nodes))

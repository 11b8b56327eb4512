"""Removal of collapsed layer libraries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domgraph.components.graph.graph_builder_comp import ProjectGraphBuilder

logger = logging.getLogger(__name__)


def remove_layer_libraries(builder: ProjectGraphBuilder, layer_domain_map: dict[str, str]) -> None:
    """
    Drop every layer library from the builder.

    File dependencies are first registered as edges, then every edge touching
    a layer library is moved onto its domain, so nothing that pointed at a
    layer is lost. A layer library whose name is also a domain name has
    already been replaced by that domain and stays.
    """
    domain_names = set(layer_domain_map.values())
    renames = {layer: domain for layer, domain in layer_domain_map.items() if layer not in domain_names}
    builder.add_file_dependencies()
    builder.redirect_dependencies(renames)

    removed = 0
    for layer_name in renames:
        if builder.has_node(layer_name):
            builder.remove_node(layer_name)
            removed += 1

    logger.debug("Removed %d layer libraries", removed)

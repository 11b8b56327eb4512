"""Application file dependency rewriting."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domgraph.components.graph.dependency_rewriter_comp import rewrite_dependencies
from domgraph.helpers.dto.graph_dto import APP

if TYPE_CHECKING:
    from domgraph.components.graph.graph_builder_comp import ProjectGraphBuilder

logger = logging.getLogger(__name__)


def convert_app_layer_dependencies(builder: ProjectGraphBuilder, layer_domain_map: dict[str, str]) -> int:
    """
    Point application file deps at domains instead of layer libraries.

    Applications belong to no domain, so nothing is excluded.

    Returns:
        Number of application nodes rewritten
    """
    count = 0
    for node in builder.iter_nodes():
        if node.type != APP:
            continue
        for record in node.files:
            record.deps = rewrite_dependencies(record.deps, layer_domain_map)
        count += 1

    logger.debug("Rewrote file deps of %d applications", count)
    return count

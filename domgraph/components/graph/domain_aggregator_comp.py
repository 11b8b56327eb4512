"""Domain node aggregation.

Builds one synthetic ``lib`` node per domain that owns the files of every
layer library in that domain, with the file deps already redirected to
domains.
"""

from __future__ import annotations

import logging

from domgraph.components.graph.dependency_rewriter_comp import rewrite_dependencies
from domgraph.helpers.dto.graph_dto import LIB, FileRecord, ProjectGraph, ProjectNode

logger = logging.getLogger(__name__)


def get_domain_root(layer_root: str) -> str:
    """Parent folder of a layer library root (``""`` when the root has no parent)."""
    head, sep, _tail = layer_root.rpartition("/")
    return head if sep else ""


def build_domain_node(layer_node: ProjectNode, domain_name: str) -> ProjectNode:
    """Create an empty domain node rooted next to the given layer library."""
    domain_root = get_domain_root(layer_node.root)
    return ProjectNode(
        name=domain_name,
        type=LIB,
        root=domain_root,
        source_root=domain_root,
        files=[],
        tags=[],
    )


def aggregate_domain_nodes(
    graph: ProjectGraph,
    layer_domain_map: dict[str, str],
) -> dict[str, ProjectNode]:
    """
    Merge layer libraries into domain nodes.

    Layer libraries are visited in graph order. The first library of a domain
    decides the domain root; each library's files are appended with their
    deps rewritten, excluding the domain itself. Files are copied, the input
    graph is left untouched.

    Args:
        graph: Input project graph
        layer_domain_map: Layer library name -> domain name

    Returns:
        Domain name -> domain node, in order of first appearance
    """
    domain_nodes: dict[str, ProjectNode] = {}

    for layer_name, domain_name in layer_domain_map.items():
        layer_node = graph.nodes[layer_name]
        domain_node = domain_nodes.get(domain_name)
        if domain_node is None:
            domain_node = build_domain_node(layer_node, domain_name)
            domain_nodes[domain_name] = domain_node

        domain_node.files.extend(
            FileRecord(
                file=record.file,
                deps=rewrite_dependencies(record.deps, layer_domain_map, exclude_domain=domain_name),
                hash=record.hash,
            )
            for record in layer_node.files
        )

    for domain_name, domain_node in domain_nodes.items():
        logger.debug("Domain %s (%s): %d files", domain_name, domain_node.root, len(domain_node.files))

    return domain_nodes

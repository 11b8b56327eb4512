"""Layer library classification.

A layer library is a ``lib`` project whose root folder starts with an
architectural layer name (``libs/orders/data-access``,
``libs/orders/feature-cart``). Its domain is the project name without the
``-<root folder>`` suffix.
"""

from __future__ import annotations

import logging

from domgraph.helpers.dto.config_dto import TransformConfig
from domgraph.helpers.dto.graph_dto import LIB, ProjectGraph, ProjectNode

logger = logging.getLogger(__name__)


def last_root_segment(root: str) -> str:
    """Final path component of a project root (``"libs/orders/ui"`` -> ``"ui"``)."""
    return root.split("/")[-1]


def is_layer_library(node: ProjectNode, config: TransformConfig) -> bool:
    """Check whether a node is a library living in a layer folder."""
    if node.type != LIB:
        return False
    folder = last_root_segment(node.root)
    return any(folder.startswith(name) for name in config.layer_names)


def get_domain_name(node: ProjectNode, config: TransformConfig) -> str:
    """
    Derive the domain a layer library belongs to.

    Returns an empty string for nodes that are not layer libraries. When the
    project name does not end with ``-<root folder>`` the name is returned
    unchanged, so the library becomes a domain of its own.
    """
    if not is_layer_library(node, config):
        return ""

    suffix = f"-{last_root_segment(node.root)}"
    if not node.name.endswith(suffix):
        logger.warning(
            "Layer library %s does not end with '%s'; using the project name as its domain",
            node.name,
            suffix,
        )
        return node.name
    return node.name[: -len(suffix)]


def build_layer_domain_map(graph: ProjectGraph, config: TransformConfig) -> dict[str, str]:
    """Map every layer library name to its domain name, in graph node order."""
    layer_domain_map: dict[str, str] = {}
    for key, node in graph.nodes.items():
        if is_layer_library(node, config):
            layer_domain_map[key] = get_domain_name(node, config)

    logger.debug(
        "Classified %d layer libraries into %d domains",
        len(layer_domain_map),
        len(set(layer_domain_map.values())),
    )
    return layer_domain_map

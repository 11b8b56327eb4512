"""Structural validation of input project graphs."""

from __future__ import annotations

from domgraph.helpers.dto.graph_dto import ProjectGraph
from domgraph.helpers.exceptions import MalformedNodeError


def validate_project_graph(graph: ProjectGraph) -> None:
    """
    Check every node has a root and a file list before anything is rewritten.

    Raises:
        MalformedNodeError: On the first node with a missing root or file list
    """
    for key, node in graph.nodes.items():
        if not isinstance(node.root, str):
            raise MalformedNodeError(key, "missing 'root'")
        if not isinstance(node.files, list):
            raise MalformedNodeError(key, "missing 'files'")

"""Copy-on-write builder for project graphs.

The builder owns a deep copy of the graph it was created from. Every
component writes through the builder, so the caller's graph is never mutated
and nobody observes a half-rewritten graph: the result only exists once
``get_updated_graph`` is called.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator

from domgraph.helpers.dto.graph_dto import Dependency, DependencyType, ProjectGraph, ProjectNode

logger = logging.getLogger(__name__)


class ProjectGraphBuilder:
    """Accumulates node additions, removals and edge changes over a graph copy."""

    def __init__(self, graph: ProjectGraph) -> None:
        self._nodes: dict[str, ProjectNode] = copy.deepcopy(graph.nodes)
        self._dependencies: dict[str, list[Dependency]] = {
            source: list(edges) for source, edges in graph.dependencies.items()
        }

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def has_node(self, name: str) -> bool:
        return name in self._nodes

    def get_node(self, name: str) -> ProjectNode:
        return self._nodes[name]

    def iter_nodes(self) -> Iterator[ProjectNode]:
        """Iterate over a snapshot of the current nodes, in insertion order."""
        return iter(list(self._nodes.values()))

    def add_node(self, node: ProjectNode) -> None:
        if node.name in self._nodes:
            msg = f"Project '{node.name}' already exists in the graph"
            raise ValueError(msg)
        self._nodes[node.name] = node

    def replace_node(self, node: ProjectNode) -> None:
        """Swap the node stored under node.name, keeping its edges."""
        if node.name not in self._nodes:
            msg = f"Project '{node.name}' does not exist in the graph"
            raise KeyError(msg)
        self._nodes[node.name] = node

    def remove_node(self, name: str) -> None:
        """Remove a node together with every edge that starts or ends at it."""
        del self._nodes[name]
        self._dependencies.pop(name, None)
        for source, edges in self._dependencies.items():
            self._dependencies[source] = [e for e in edges if e.target != name]

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_implicit_dependency(self, source: str, target: str) -> None:
        self._add_dependency(source, target, "implicit")

    def add_static_dependency(self, source: str, target: str) -> None:
        self._add_dependency(source, target, "static")

    def add_file_dependencies(self) -> None:
        """Register a static edge for every file dependency on a node of the graph."""
        for node in self.iter_nodes():
            for record in node.files:
                for target in record.deps:
                    if target in self._nodes:
                        self.add_static_dependency(node.name, target)

    def redirect_dependencies(self, renames: dict[str, str]) -> None:
        """
        Re-point explicit edges whose source or target is renamed.

        Edges that become self-loops are dropped; duplicates collapse onto the
        first edge seen for a (source, target) pair.
        """
        redirected: dict[str, list[Dependency]] = {}
        for source, edges in self._dependencies.items():
            for edge in edges:
                new_source = renames.get(edge.source, edge.source)
                new_target = renames.get(edge.target, edge.target)
                if new_source == new_target:
                    continue
                bucket = redirected.setdefault(new_source, [])
                if any(e.target == new_target for e in bucket):
                    continue
                bucket.append(Dependency(source=new_source, target=new_target, type=edge.type))
        self._dependencies = redirected

    def _add_dependency(self, source: str, target: str, dep_type: DependencyType) -> None:
        if source not in self._nodes:
            msg = f"Source project '{source}' does not exist"
            raise ValueError(msg)
        if source == target:
            logger.debug("Ignoring self dependency of %s", source)
            return
        edges = self._dependencies.setdefault(source, [])
        if any(e.target == target for e in edges):
            return
        edges.append(Dependency(source=source, target=target, type=dep_type))

    # ------------------------------------------------------------------
    # Result
    # ------------------------------------------------------------------

    def get_updated_graph(self) -> ProjectGraph:
        """
        Produce the resulting graph.

        Edges are rebuilt per node: explicitly registered edges first, then
        one static edge for every file dependency that names another node of
        the graph. File dependencies on names outside the graph (external
        packages) stay in the file data but produce no edge.
        """
        dependencies: dict[str, list[Dependency]] = {}
        for source, node in self._nodes.items():
            edges: dict[str, Dependency] = {}
            for edge in self._dependencies.get(source, []):
                if edge.target != source and edge.target not in edges:
                    edges[edge.target] = edge
            for record in node.files:
                for target in record.deps:
                    if target in self._nodes and target != source and target not in edges:
                        edges[target] = Dependency(source=source, target=target, type="static")
            dependencies[source] = list(edges.values())

        return ProjectGraph(nodes=dict(self._nodes), dependencies=dependencies)

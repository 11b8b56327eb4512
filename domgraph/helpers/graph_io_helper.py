"""
JSON reader/writer for project graphs.

Uses the layout emitted by monorepo build tools:

    {
      "nodes": {"<name>": {"name": ..., "type": "lib", "data": {"root": ..., "files": [...]}}},
      "dependencies": {"<name>": [{"source": ..., "target": ..., "type": "static"}]}
    }

No graph logic lives here - only conversion between JSON and the DTOs.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from domgraph.helpers.dto.graph_dto import Dependency, FileRecord, ProjectGraph, ProjectNode
from domgraph.helpers.exceptions import GraphFormatError, MalformedNodeError

logger = logging.getLogger(__name__)


def graph_from_dict(raw: dict[str, Any]) -> ProjectGraph:
    """
    Build a ProjectGraph from its JSON-compatible dict form.

    Raises:
        GraphFormatError: If the top-level structure is not as expected
        MalformedNodeError: If a node has no root or no file list
    """
    if not isinstance(raw, dict) or not isinstance(raw.get("nodes"), dict):
        msg = "Project graph must be an object with a 'nodes' mapping"
        raise GraphFormatError(msg)

    nodes: dict[str, ProjectNode] = {}
    for key, raw_node in raw["nodes"].items():
        nodes[key] = _node_from_dict(key, raw_node)

    dependencies: dict[str, list[Dependency]] = {}
    raw_deps = raw.get("dependencies") or {}
    if not isinstance(raw_deps, dict):
        msg = "'dependencies' must be a mapping of project name to edge list"
        raise GraphFormatError(msg)
    for source, edges in raw_deps.items():
        try:
            dependencies[source] = [
                Dependency(source=e["source"], target=e["target"], type=e.get("type", "static")) for e in edges
            ]
        except (KeyError, TypeError) as e:
            msg = f"Invalid dependency entry for '{source}': {e}"
            raise GraphFormatError(msg) from e

    return ProjectGraph(nodes=nodes, dependencies=dependencies)


def graph_to_dict(graph: ProjectGraph) -> dict[str, Any]:
    """Convert a ProjectGraph to its JSON-compatible dict form."""
    return {
        "nodes": {key: _node_to_dict(node) for key, node in graph.nodes.items()},
        "dependencies": {
            source: [{"source": d.source, "target": d.target, "type": d.type} for d in edges]
            for source, edges in graph.dependencies.items()
        },
    }


def load_graph(path: Path) -> ProjectGraph:
    """Read a project graph JSON file."""
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        msg = f"{path} is not valid JSON: {e}"
        raise GraphFormatError(msg) from e

    graph = graph_from_dict(raw)
    logger.debug("Loaded %d nodes from %s", len(graph.nodes), path)
    return graph


def dump_graph(graph: ProjectGraph) -> str:
    """Serialize a project graph to an indented JSON string."""
    return json.dumps(graph_to_dict(graph), indent=2, ensure_ascii=False)


def write_graph(graph: ProjectGraph, output_path: Path) -> None:
    """Write a project graph to a JSON file, creating parent folders."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        f.write(dump_graph(graph))
        f.write("\n")
    logger.debug("Wrote %d nodes to %s", len(graph.nodes), output_path)


# ----------------------------------------------------------------------
# Node conversion
# ----------------------------------------------------------------------


def _node_from_dict(key: str, raw_node: dict[str, Any]) -> ProjectNode:
    if not isinstance(raw_node, dict):
        msg = f"Node '{key}' must be an object"
        raise GraphFormatError(msg)
    if "type" not in raw_node:
        raise MalformedNodeError(key, "missing 'type'")

    data = raw_node.get("data") or {}
    if not isinstance(data, dict):
        raise MalformedNodeError(key, "'data' must be an object")
    if data.get("root") is None:
        raise MalformedNodeError(key, "missing 'root'")
    if data.get("files") is None:
        raise MalformedNodeError(key, "missing 'files'")
    for list_field in ("files", "tags", "implicitDependencies"):
        if not isinstance(data.get(list_field) or [], list):
            raise MalformedNodeError(key, f"'{list_field}' must be a list")

    try:
        files = [
            FileRecord(file=f["file"], deps=list(f.get("deps") or []), hash=f.get("hash")) for f in data["files"]
        ]
    except (KeyError, TypeError, AttributeError) as e:
        raise MalformedNodeError(key, f"invalid file entry ({e})") from e

    return ProjectNode(
        name=key,
        type=raw_node["type"],
        root=data["root"],
        source_root=data.get("sourceRoot"),
        files=files,
        tags=list(data.get("tags") or []),
        implicit_dependencies=list(data.get("implicitDependencies") or []),
        project_type=data.get("projectType"),
    )


def _node_to_dict(node: ProjectNode) -> dict[str, Any]:
    data: dict[str, Any] = {
        "root": node.root,
        "sourceRoot": node.source_root,
        "files": [_file_to_dict(f) for f in node.files],
        "tags": list(node.tags),
        "implicitDependencies": list(node.implicit_dependencies),
    }
    if node.project_type is not None:
        data["projectType"] = node.project_type
    return {"name": node.name, "type": node.type, "data": data}


def _file_to_dict(record: FileRecord) -> dict[str, Any]:
    out: dict[str, Any] = {"file": record.file, "deps": list(record.deps)}
    if record.hash is not None:
        out["hash"] = record.hash
    return out

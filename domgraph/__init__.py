"""
domgraph - collapse layered monorepo project graphs into domain graphs.
"""

from domgraph.__version__ import __version__
from domgraph.helpers.dto import Dependency, FileRecord, ProjectGraph, ProjectNode, TransformConfig
from domgraph.helpers.exceptions import (
    DomainNameCollisionError,
    GraphFormatError,
    MalformedNodeError,
    ProjectGraphError,
)
from domgraph.workflows.graph.process_project_graph_wf import process_project_graph

__all__ = [
    "Dependency",
    "DomainNameCollisionError",
    "FileRecord",
    "GraphFormatError",
    "MalformedNodeError",
    "ProjectGraph",
    "ProjectGraphError",
    "ProjectNode",
    "TransformConfig",
    "__version__",
    "process_project_graph",
]

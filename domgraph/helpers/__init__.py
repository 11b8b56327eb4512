"""
Helpers package.
"""

from .dto import Dependency, FileRecord, ProjectGraph, ProjectNode, TransformConfig
from .exceptions import DomainNameCollisionError, GraphFormatError, MalformedNodeError, ProjectGraphError
from .graph_io_helper import dump_graph, graph_from_dict, graph_to_dict, load_graph, write_graph

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
    "dump_graph",
    "graph_from_dict",
    "graph_to_dict",
    "load_graph",
    "write_graph",
]

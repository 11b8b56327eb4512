"""
DTO package.
"""

from .config_dto import DEFAULT_E2E_PREFIX, DEFAULT_LAYER_NAMES, TransformConfig
from .graph_dto import APP, E2E, LIB, Dependency, DependencyType, FileRecord, NodeKind, ProjectGraph, ProjectNode

__all__ = [
    "APP",
    "DEFAULT_E2E_PREFIX",
    "DEFAULT_LAYER_NAMES",
    "E2E",
    "LIB",
    "Dependency",
    "DependencyType",
    "FileRecord",
    "NodeKind",
    "ProjectGraph",
    "ProjectNode",
    "TransformConfig",
]

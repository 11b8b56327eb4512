"""
Graph rewrite components.
"""

from .app_dependency_comp import convert_app_layer_dependencies
from .dependency_rewriter_comp import rewrite_dependencies
from .domain_aggregator_comp import aggregate_domain_nodes, build_domain_node, get_domain_root
from .domain_installer_comp import install_domain_nodes
from .e2e_converter_comp import convert_e2e_nodes
from .graph_builder_comp import ProjectGraphBuilder
from .layer_classifier_comp import build_layer_domain_map, get_domain_name, is_layer_library, last_root_segment
from .library_pruner_comp import remove_layer_libraries
from .node_validation_comp import validate_project_graph

__all__ = [
    "ProjectGraphBuilder",
    "aggregate_domain_nodes",
    "build_domain_node",
    "build_layer_domain_map",
    "convert_app_layer_dependencies",
    "convert_e2e_nodes",
    "get_domain_name",
    "get_domain_root",
    "install_domain_nodes",
    "is_layer_library",
    "last_root_segment",
    "remove_layer_libraries",
    "rewrite_dependencies",
    "validate_project_graph",
]

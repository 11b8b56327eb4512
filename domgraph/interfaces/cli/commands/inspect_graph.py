"""
Inspect command: show which projects are layer libraries and their domains.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.markup import escape

from domgraph.components.graph.layer_classifier_comp import build_layer_domain_map
from domgraph.helpers.exceptions import ProjectGraphError
from domgraph.helpers.graph_io_helper import load_graph
from domgraph.interfaces.cli.ui import print_error, print_info, print_table, print_warning
from domgraph.interfaces.cli.utils import load_service


def cmd_inspect(args: argparse.Namespace) -> int:
    """List layer libraries with their root and derived domain."""
    try:
        transform_config = load_service(args).get_transform_config()
        graph = load_graph(Path(args.input))
    except (ProjectGraphError, OSError, ValueError) as e:
        print_error(f"Inspect failed: {escape(str(e))}")
        return 1

    layer_domain_map = build_layer_domain_map(graph, transform_config)
    if not layer_domain_map:
        print_info(f"No layer libraries found in {args.input}")
        return 0

    rows = [[name, graph.nodes[name].root, domain] for name, domain in layer_domain_map.items()]
    print_table("Layer libraries", ["Project", "Root", "Domain"], rows)
    print_info(f"{len(layer_domain_map)} layer libraries in {len(set(layer_domain_map.values()))} domains")

    for name, domain in layer_domain_map.items():
        if name == domain:
            print_warning(f"{escape(name)} does not end with its root folder name; it becomes a domain of its own")
    for domain in sorted(set(layer_domain_map.values())):
        if domain in graph.nodes and domain not in layer_domain_map:
            print_warning(f"Domain {escape(domain)} collides with an existing project; transform will fail")
    return 0

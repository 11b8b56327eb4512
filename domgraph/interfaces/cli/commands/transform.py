"""
Transform command: collapse layer libraries of a graph file into domains.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from domgraph.helpers.exceptions import ProjectGraphError
from domgraph.helpers.graph_io_helper import dump_graph, load_graph, write_graph
from domgraph.interfaces.cli.ui import COLOR_SUCCESS, InfoPanel, print_error
from domgraph.interfaces.cli.utils import load_service
from domgraph.workflows.graph.process_project_graph_wf import process_project_graph


def cmd_transform(args: argparse.Namespace) -> int:
    """
    Read a project graph JSON file, transform it and write the result.

    Without --output the graph is printed to stdout and no summary is shown.
    """
    try:
        transform_config = load_service(args).get_transform_config()
        graph = load_graph(Path(args.input))
        result = process_project_graph(graph, transform_config)
    except (ProjectGraphError, OSError, ValueError) as e:
        print_error(f"Transform failed: {escape(str(e))}")
        return 1

    if args.output is None:
        sys.stdout.write(dump_graph(result))
        sys.stdout.write("\n")
        return 0

    output_path = Path(args.output)
    try:
        write_graph(result, output_path)
    except OSError as e:
        print_error(f"Cannot write {output_path}: {escape(str(e))}")
        return 1

    added = sorted(set(result.nodes) - set(graph.nodes))
    removed = sorted(set(graph.nodes) - set(result.nodes))
    edge_count = sum(len(edges) for edges in result.dependencies.values())
    content = f"""[bold]Input:[/bold] {args.input} ({len(graph.nodes)} projects)
[bold]Output:[/bold] {output_path} ({len(result.nodes)} projects, {edge_count} edges)
[bold]Domains:[/bold] {", ".join(added) or "none"}
[bold]Layer libraries removed:[/bold] {len(removed)}"""
    InfoPanel.show("Transform Complete", content, COLOR_SUCCESS)
    return 0

"""Graph workflows."""

from .process_project_graph_wf import process_project_graph

__all__ = ["process_project_graph"]

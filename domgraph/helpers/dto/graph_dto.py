"""Project graph DTOs shared by components, workflows and the JSON helpers.

The shape follows the monorepo project graph produced by static import
analysis: nodes keyed by project name, each owning the files of the project
and the names of the projects those files reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

NodeKind = Literal["app", "lib", "e2e"]
DependencyType = Literal["static", "implicit"]

APP: NodeKind = "app"
LIB: NodeKind = "lib"
E2E: NodeKind = "e2e"


@dataclass
class FileRecord:
    """A source file of a project and the projects it statically references."""

    file: str  # Path relative to the workspace root
    deps: list[str] = field(default_factory=list)  # Project (or domain) names
    hash: str | None = None


@dataclass
class ProjectNode:
    """
    One project of the workspace.

    Attributes:
        name: Unique project name (graph key)
        type: "app", "lib" or "e2e"
        root: Project folder relative to the workspace root (forward slashes)
        source_root: Source folder, usually "<root>/src"
        files: Files owned by the project, in analysis order
        tags: Free-form project tags
        implicit_dependencies: Project names not expressed through file deps
        project_type: "application" / "library" when known
    """

    name: str
    type: NodeKind
    root: str
    source_root: str | None = None
    files: list[FileRecord] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    implicit_dependencies: list[str] = field(default_factory=list)
    project_type: str | None = None


@dataclass(frozen=True)
class Dependency:
    """Directed edge between two projects."""

    source: str
    target: str
    type: DependencyType = "static"


@dataclass
class ProjectGraph:
    """Complete project graph: nodes plus explicitly registered edges."""

    nodes: dict[str, ProjectNode] = field(default_factory=dict)
    dependencies: dict[str, list[Dependency]] = field(default_factory=dict)

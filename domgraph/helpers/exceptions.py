"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class ProjectGraphError(Exception):
    """Base class for errors that abort a project graph transformation."""


class MalformedNodeError(ProjectGraphError):
    """Raised when a node is missing its root or its file list."""

    def __init__(self, node_name: str, reason: str) -> None:
        self.node_name = node_name
        self.reason = reason
        super().__init__(f"Malformed node '{node_name}': {reason}")


class DomainNameCollisionError(ProjectGraphError):
    """Raised when a derived domain name is already used by a non-layer node."""

    def __init__(self, domain_name: str) -> None:
        self.domain_name = domain_name
        super().__init__(
            f"Domain '{domain_name}' collides with an existing project of the same name",
        )


class GraphFormatError(ProjectGraphError):
    """Raised when a serialized project graph does not have the expected shape."""

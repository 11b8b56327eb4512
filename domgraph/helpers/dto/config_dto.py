"""Configuration DTOs for the domain graph transform."""

from __future__ import annotations

from dataclasses import dataclass

# Architectural layer folder names, matched as prefixes of a library's root folder
DEFAULT_LAYER_NAMES: tuple[str, ...] = (
    "application",
    "data-access",
    "directive",
    "domain",
    "feature",
    "shell",
    "ui",
    "util",
)

# Name prefix marking end-to-end test projects
DEFAULT_E2E_PREFIX = "e2e-"


@dataclass(frozen=True)
class TransformConfig:
    """
    Settings for one project graph transformation.

    All matching is case-sensitive. Construct through ConfigService in
    application code; direct construction is fine in tests.
    """

    layer_names: tuple[str, ...] = DEFAULT_LAYER_NAMES
    e2e_prefix: str = DEFAULT_E2E_PREFIX

    def __post_init__(self) -> None:
        """Reject configurations that would silently disable the transform."""
        if not self.layer_names:
            msg = "layer_names must contain at least one layer name"
            raise ValueError(msg)
        if any(not name for name in self.layer_names):
            msg = f"layer_names must not contain empty entries: {self.layer_names!r}"
            raise ValueError(msg)
        if not self.e2e_prefix:
            msg = "e2e_prefix must not be empty"
            raise ValueError(msg)

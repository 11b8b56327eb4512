"""
Pytest fixtures and configuration for the test suite.

Graphs are built in memory with the factories in tests/factories.py.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path so tests can import domgraph package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from domgraph.helpers.dto.config_dto import TransformConfig
from domgraph.helpers.dto.graph_dto import ProjectGraph
from tests.factories import make_graph, make_node

# === FIXTURES ===


@pytest.fixture
def transform_config() -> TransformConfig:
    """Default layer vocabulary and e2e prefix."""
    return TransformConfig()


@pytest.fixture
def layered_graph() -> ProjectGraph:
    """
    Workspace with two layered domains, a shared util, a plain library, an
    application and an e2e project.
    """
    return make_graph(
        make_node(
            "orders-data-access",
            "libs/orders/data-access",
            files={"src/api.ts": ["orders-domain", "rxjs"]},
        ),
        make_node("orders-domain", "libs/orders/domain", files={"src/model.ts": []}),
        make_node(
            "orders-feature",
            "libs/orders/feature",
            files={"src/cart.ts": ["orders-data-access", "shared-util"]},
        ),
        make_node("shared-util", "libs/shared/util", files={"src/format.ts": []}),
        make_node("billing-domain", "libs/billing/domain", files={"src/invoice.ts": ["orders-domain"]}),
        make_node(
            "billing-feature",
            "libs/billing/feature",
            files={"src/pay.ts": ["billing-domain", "orders-feature"]},
        ),
        make_node(
            "billing-ui",
            "libs/billing/ui",
            files={"src/button.ts": ["billing-feature", "shared-util"]},
            tags=["type:ui"],
        ),
        make_node("design-system", "libs/design-system", files={"src/theme.ts": ["shared-util"]}),
        make_node(
            "checkout-app",
            "apps/checkout",
            node_type="app",
            files={"src/main.ts": ["orders-feature", "billing-ui", "design-system", "@angular/core"]},
        ),
        make_node(
            "e2e-checkout",
            "apps/e2e-checkout",
            node_type="app",
            implicit=["checkout-app", "orders-feature"],
        ),
    )


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a fast unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test (runs the CLI)")

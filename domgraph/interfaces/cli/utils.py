"""
Shared CLI helpers.
"""

from __future__ import annotations

import argparse
import logging

from domgraph.services.config_svc import ConfigService


def load_service(args: argparse.Namespace) -> ConfigService:
    """Create the ConfigService for a command and configure logging from it."""
    service = ConfigService(config_path=getattr(args, "config", None))
    level = "DEBUG" if getattr(args, "verbose", False) else service.get_log_level()
    configure_logging(level)
    return service


def configure_logging(level: str) -> None:
    """Configure logging once for the whole process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

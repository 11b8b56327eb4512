"""Services package."""

from .config_svc import ConfigService

__all__ = ["ConfigService"]

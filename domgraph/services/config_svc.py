#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML files, overrides and env vars
#  - Caches composed config
#  - Builds the TransformConfig handed to the graph workflow
# ======================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from domgraph.helpers.dto.config_dto import DEFAULT_E2E_PREFIX, DEFAULT_LAYER_NAMES, TransformConfig

ENV_PREFIX = "DOMGRAPH_"


class ConfigService:
    """
    Service for loading and caching domgraph configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, config_path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> None:
        """
        Initialize ConfigService with empty cache.

        Args:
            config_path: Explicit YAML file; must exist when given
            overrides: Values applied after all YAML files
        """
        self._config_path = Path(config_path) if config_path else None
        self._overrides = overrides or {}
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("e2e_prefix")
            'e2e-'
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def get_transform_config(self) -> TransformConfig:
        """
        Build a TransformConfig from the current configuration.

        Raises:
            ValueError: If layer_names / e2e_prefix are invalid
        """
        cfg = self.get_config()
        layer_names = cfg["layer_names"]
        if isinstance(layer_names, str):
            layer_names = _split_names(layer_names)
        return TransformConfig(
            layer_names=tuple(str(name) for name in layer_names),
            e2e_prefix=str(cfg["e2e_prefix"]),
        )

    def get_log_level(self) -> str:
        return str(self.get("log_level", "INFO")).upper()

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ./config/domgraph.yaml (if present)
          3) $DOMGRAPH_CONFIG (if set)
          4) config_path passed to the constructor
          5) overrides passed to the constructor
          6) Environment variables (DOMGRAPH_LAYER_NAMES, DOMGRAPH_E2E_PREFIX, DOMGRAPH_LOG_LEVEL)
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml(Path.cwd() / "config" / "domgraph.yaml"))

        env_path = os.getenv(f"{ENV_PREFIX}CONFIG")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(Path(env_path)))

        if self._config_path is not None:
            self._deep_merge(cfg, self._load_yaml(self._config_path, required=True))

        if self._overrides:
            self._deep_merge(cfg, self._overrides)

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """Base defaults; all fields present so no KeyErrors downstream."""
        return {
            "layer_names": list(DEFAULT_LAYER_NAMES),
            "e2e_prefix": DEFAULT_E2E_PREFIX,
            "log_level": "INFO",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge dict b into dict a (mutates a, returns it)."""
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: Path, required: bool = False) -> dict[str, Any]:
        """
        Load a YAML mapping.

        Optional files that are missing or unreadable yield {} with a warning;
        a required file raises instead.
        """
        if not path.exists():
            if required:
                msg = f"Config file not found: {path}"
                raise FileNotFoundError(msg)
            return {}

        try:
            with path.open(encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            if required:
                if isinstance(e, yaml.YAMLError):
                    msg = f"Config file {path} is not valid YAML: {e}"
                    raise ValueError(msg) from e
                raise
            self._logger.warning("Ignoring unreadable config file %s: %s", path, e)
            return {}

        if not isinstance(loaded, dict):
            msg = f"Config file {path} must contain a mapping, got {type(loaded).__name__}"
            if required:
                raise ValueError(msg)
            self._logger.warning(msg)
            return {}
        return loaded

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          DOMGRAPH_LAYER_NAMES=feature,ui,util
          DOMGRAPH_E2E_PREFIX=e2e-
          DOMGRAPH_LOG_LEVEL=DEBUG
        """
        layer_names = os.getenv(f"{ENV_PREFIX}LAYER_NAMES")
        if layer_names:
            cfg["layer_names"] = _split_names(layer_names)

        e2e_prefix = os.getenv(f"{ENV_PREFIX}E2E_PREFIX")
        if e2e_prefix:
            cfg["e2e_prefix"] = e2e_prefix

        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            cfg["log_level"] = log_level


def _split_names(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]

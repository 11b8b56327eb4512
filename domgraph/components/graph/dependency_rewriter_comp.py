"""Dependency list rewriting through the layer -> domain map."""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


def rewrite_dependencies(
    deps: Iterable[str] | None,
    layer_domain_map: dict[str, str],
    exclude_domain: str | None = None,
) -> list[str]:
    """
    Redirect dependencies on layer libraries to their domains.

    Each name is resolved in order:
    1. already a domain name -> kept
    2. a layer library name -> replaced by its domain
    3. anything else (apps, plain libraries, external packages) -> kept as-is

    The result keeps first-seen order, contains no duplicates and never
    contains ``exclude_domain`` (used to stop a domain depending on itself).

    Args:
        deps: Dependency names, may be None for files without deps
        layer_domain_map: Layer library name -> domain name
        exclude_domain: Domain to drop from the result

    Returns:
        Rewritten dependency names

    Example:
        >>> layer_domain_map = {"orders-ui": "orders", "orders-util": "orders"}
        >>> rewrite_dependencies(["orders-ui", "orders-util", "lodash"], layer_domain_map)
        ['orders', 'lodash']
    """
    domain_names = set(layer_domain_map.values())
    result: list[str] = []
    seen: set[str] = set()

    for dep in deps or ():
        if dep in domain_names:
            target = dep
        elif dep in layer_domain_map:
            target = layer_domain_map[dep]
        else:
            logger.debug("Passing through non-layer dependency %s", dep)
            target = dep

        if target == exclude_domain or target in seen:
            continue
        seen.add(target)
        result.append(target)

    return result

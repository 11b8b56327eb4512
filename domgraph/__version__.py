"""Version information for domgraph."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the graph model or JSON format
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"

# Version history:
# 0.2.0 - Copy-on-write transform and configuration
#         - ProjectGraphBuilder deep-copies the input graph (caller graph untouched)
#         - Domain files kept in stable input order
#         - Layer vocabulary and e2e prefix configurable via YAML / env
#         - DomainNameCollisionError and MalformedNodeError
#         - Explicit edges to layer libraries re-homed onto their domain
# 0.1.0 - Initial release
#         - Layer libraries collapsed into domain nodes
#         - e2e implicit dependencies registered as graph edges
#         - JSON graph reader/writer and CLI

"""Resource catalog and dependency graph engine."""

from .catalog import ResourceCatalog, ResourceEntry
from .dependency_graph import CHAIN_SEPARATOR, TREE_SEPARATOR, DependencyGraph

__all__ = [
    "CHAIN_SEPARATOR",
    "TREE_SEPARATOR",
    "DependencyGraph",
    "ResourceCatalog",
    "ResourceEntry",
]

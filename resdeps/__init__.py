"""resdeps - inspect and order dependencies between catalogued resources."""

from resdeps.errors import (
    CatalogLoadError,
    CyclicDependency,
    DuplicateResource,
    ResolutionError,
    TraversalDepthExceeded,
    UnknownResource,
)
from resdeps.loader import dump_catalog, load_catalog, loads_catalog
from resdeps.resolution import DependencyGraph, ResourceCatalog, ResourceEntry
from resdeps.version import (
    CATALOG_FORMAT_VERSION,
    RESDEPS_VERSION,
    RESDEPS_VERSION_MAJOR,
    RESDEPS_VERSION_MINOR,
    RESDEPS_VERSION_PATCH,
    get_version_info,
    get_version_string,
)

__version__ = RESDEPS_VERSION
__all__ = [
    "CATALOG_FORMAT_VERSION",
    "RESDEPS_VERSION",
    "RESDEPS_VERSION_MAJOR",
    "RESDEPS_VERSION_MINOR",
    "RESDEPS_VERSION_PATCH",
    "CatalogLoadError",
    "CyclicDependency",
    "DependencyGraph",
    "DuplicateResource",
    "ResolutionError",
    "ResourceCatalog",
    "ResourceEntry",
    "TraversalDepthExceeded",
    "UnknownResource",
    "dump_catalog",
    "get_version_info",
    "get_version_string",
    "load_catalog",
    "loads_catalog",
]

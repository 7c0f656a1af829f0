"""Exceptions raised while loading and querying resource catalogs."""

from __future__ import annotations

from collections.abc import Sequence


class ResolutionError(Exception):
    """Base class for all catalog and dependency resolution errors."""


class UnknownResource(ResolutionError):
    """A queried or required resource is not present in the catalog."""

    def __init__(self, resource_id: str, required_by: str | None = None) -> None:
        if required_by:
            message = f"Unknown resource '{resource_id}' (required by '{required_by}')"
        else:
            message = f"Unknown resource '{resource_id}'"
        super().__init__(message)
        self.resource_id = resource_id
        self.required_by = required_by


class CyclicDependency(ResolutionError):
    """The requires-relation reachable from a query root contains a cycle."""

    def __init__(self, cycle: Sequence[str], message: str | None = None) -> None:
        self.cycle = list(cycle)
        super().__init__(message or f"Cyclic dependency: {' -> '.join(self.cycle)}")


class TraversalDepthExceeded(CyclicDependency):
    """A single-path walk went deeper than the catalog allows."""

    def __init__(self, resource_id: str, limit: int, path: Sequence[str] = ()) -> None:
        super().__init__(
            path,
            f"Traversal from '{resource_id}' exceeded the depth limit of {limit}",
        )
        self.resource_id = resource_id
        self.limit = limit


class DuplicateResource(ResolutionError):
    """Two catalog entries share the same identifier."""

    def __init__(self, resource_id: str) -> None:
        super().__init__(f"Duplicate resource '{resource_id}'")
        self.resource_id = resource_id


class CatalogLoadError(ResolutionError):
    """A catalog document could not be read or has the wrong shape."""

    def __init__(self, path: str | None, message: str) -> None:
        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")
        self.path = path

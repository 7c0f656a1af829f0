"""Resource catalog: metadata and direct requirements keyed by identifier."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from resdeps.errors import DuplicateResource, UnknownResource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceEntry:
    """A single resource and the resources it directly requires."""

    resource: str
    name: str = ""
    sdesc: str = ""
    ldesc: str = ""
    category: str = ""
    requires: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Lists passed by loaders are frozen so the entry stays hashable
        if not isinstance(self.requires, tuple):
            object.__setattr__(self, "requires", tuple(self.requires))

    @property
    def is_leaf(self) -> bool:
        return not self.requires


class ResourceCatalog:
    """Read-only mapping from resource identifier to its entry.

    Entries keep the order they were supplied in. That order, together with
    the order of each ``requires`` list, is the only ordering any query
    relies on.
    """

    def __init__(self, entries: Iterable[ResourceEntry] = ()) -> None:
        self._entries: dict[str, ResourceEntry] = {}
        for entry in entries:
            if entry.resource in self._entries:
                raise DuplicateResource(entry.resource)
            self._entries[entry.resource] = entry
        logger.debug("Catalog built with %d resources", len(self._entries))

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ResourceEntry]:
        return iter(self._entries.values())

    def ids(self) -> list[str]:
        """Return all identifiers in catalog order."""
        return list(self._entries)

    def get(self, resource_id: str) -> ResourceEntry:
        """Return the entry for ``resource_id``."""
        try:
            return self._entries[resource_id]
        except KeyError:
            raise UnknownResource(resource_id) from None

    def find(self, resource_id: str) -> ResourceEntry | None:
        """Return the entry for ``resource_id`` or ``None``."""
        return self._entries.get(resource_id)

    def direct_requirements(self, resource_id: str) -> tuple[str, ...]:
        """Return the declared requires list of ``resource_id`` verbatim."""
        return self.get(resource_id).requires

    def categories(self) -> list[str]:
        """Return distinct categories in first-seen order."""
        seen: dict[str, None] = {}
        for entry in self._entries.values():
            seen.setdefault(entry.category, None)
        return list(seen)

    def by_category(self, category: str) -> list[ResourceEntry]:
        return [entry for entry in self._entries.values() if entry.category == category]

    def dangling_requirements(self) -> list[tuple[str, str]]:
        """Return ``(resource, missing_requirement)`` pairs in catalog order."""
        dangling = []
        for entry in self._entries.values():
            for requirement in entry.requires:
                if requirement not in self._entries:
                    dangling.append((entry.resource, requirement))
        return dangling

    def describe(self, resource_id: str) -> str:
        """Render an entry as six ``Label: value`` lines."""
        entry = self.get(resource_id)
        lines = [
            f"Resource: {entry.resource}",
            f"Name: {entry.name}",
            f"Short Description: {entry.sdesc}",
            f"Long Description: {entry.ldesc}",
            f"Category: {entry.category}",
            f"Requirements: [{', '.join(entry.requires)}]",
        ]
        return "".join(f"{line}\n" for line in lines)

    def show_resource_entry(self, resource_id: str, out: TextIO | None = None) -> None:
        """Write :meth:`describe` output to ``out`` (stdout by default)."""
        text = self.describe(resource_id)
        (out or sys.stdout).write(text)

"""JSON serialization for resource catalogs."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from resdeps.errors import CatalogLoadError
from resdeps.resolution.catalog import ResourceCatalog, ResourceEntry
from resdeps.version import CATALOG_FORMAT_VERSION

logger = logging.getLogger(__name__)

ENTRY_FIELDS = ("name", "sdesc", "ldesc", "category")

# Values a YAML or JSON document may use for identifiers and text fields
SCALAR_TYPES = (str, int, float)


class JsonSerializer:
    """JSON serializer for resource catalogs with optional metadata."""

    format_name = "resdeps-json"

    def __init__(self, include_metadata: bool = True) -> None:
        self.include_metadata = include_metadata

    def serialize(self, catalog: ResourceCatalog, output_path: str | Path | None = None) -> str:
        """Serialize a catalog to JSON format."""
        serialized = self._serialize_with_metadata(catalog)
        json_str = json.dumps(serialized, indent=2, ensure_ascii=False)

        if output_path:
            with Path(output_path).open("w", encoding="utf-8") as f:
                f.write(json_str)

        return json_str

    def deserialize(
        self,
        json_str: str | None = None,
        input_path: str | Path | None = None,
    ) -> ResourceCatalog:
        """Deserialize JSON to a catalog."""
        source = str(input_path) if input_path else None
        if input_path:
            json_str = self._read(input_path)

        if not json_str:
            raise CatalogLoadError(source, "No JSON input provided")

        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(source, f"Invalid JSON: {e}") from e
        return self._deserialize_catalog(data, source)

    def _read(self, input_path: str | Path) -> str:
        try:
            with Path(input_path).open(encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(str(input_path), f"Cannot read catalog: {e}") from e

    def _serialize_with_metadata(self, catalog: ResourceCatalog) -> dict[str, Any]:
        """Serialize with metadata."""
        result: dict[str, Any] = {"resources": [self._serialize_entry(e) for e in catalog]}

        if self.include_metadata:
            result["metadata"] = {
                "format": self.format_name,
                "version": CATALOG_FORMAT_VERSION,
                "resources_count": len(catalog),
                "categories": catalog.categories(),
            }

        return result

    def _serialize_entry(self, entry: ResourceEntry) -> dict[str, Any]:
        return {
            "resource": entry.resource,
            "name": entry.name,
            "sdesc": entry.sdesc,
            "ldesc": entry.ldesc,
            "category": entry.category,
            "requires": list(entry.requires),
        }

    def _deserialize_catalog(self, data: Any, source: str | None) -> ResourceCatalog:
        """Build a catalog from a ``{"resources": [...]}`` document or a bare list."""
        if isinstance(data, dict):
            items = data.get("resources")
            if items is None:
                raise CatalogLoadError(source, "Missing 'resources' section")
        else:
            items = data

        if not isinstance(items, list):
            raise CatalogLoadError(source, "'resources' must be a list of entries")

        entries = [self._deserialize_entry(item, index, source) for index, item in enumerate(items)]
        catalog = ResourceCatalog(entries)
        logger.debug("Loaded %d resources from %s", len(catalog), source or "<string>")

        for resource, requirement in catalog.dangling_requirements():
            logger.warning("Resource '%s' requires unknown resource '%s'", resource, requirement)

        return catalog

    def _deserialize_entry(self, item: Any, index: int, source: str | None) -> ResourceEntry:
        if not isinstance(item, dict):
            raise CatalogLoadError(source, f"Entry {index} is not a mapping")
        resource = item.get("resource")
        if not isinstance(resource, SCALAR_TYPES) or resource == "":
            raise CatalogLoadError(source, f"Entry {index} has no 'resource' identifier")

        requires = item.get("requires") or []
        if isinstance(requires, str):
            requires = requires.split()
        elif not isinstance(requires, list):
            raise CatalogLoadError(source, f"Entry '{resource}' has invalid 'requires'")

        if not all(isinstance(req, SCALAR_TYPES) for req in requires):
            raise CatalogLoadError(source, f"Entry '{resource}' has invalid 'requires'")

        fields = {}
        for key in ENTRY_FIELDS:
            value = item.get(key)
            if value is None:
                value = ""
            elif not isinstance(value, SCALAR_TYPES):
                raise CatalogLoadError(source, f"Entry '{resource}' has invalid '{key}'")
            fields[key] = str(value)
        return ResourceEntry(
            resource=str(resource),
            requires=tuple(str(req) for req in requires),
            **fields,
        )

"""YAML serialization for resource catalogs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from resdeps.errors import CatalogLoadError
from resdeps.resolution.catalog import ResourceCatalog
from resdeps.serialization.json_serializer import JsonSerializer


class YamlSerializer(JsonSerializer):
    """YAML serializer for resource catalogs with human-readable output."""

    format_name = "resdeps-yaml"

    def __init__(self, include_metadata: bool = True, flow_style: bool = False) -> None:
        super().__init__(include_metadata)
        self.flow_style = flow_style

    def serialize(self, catalog: ResourceCatalog, output_path: str | Path | None = None) -> str:
        """Serialize a catalog to YAML format."""
        serialized = self._serialize_with_metadata(catalog)

        yaml_str = yaml.dump(
            serialized,
            default_flow_style=self.flow_style,
            allow_unicode=True,
            sort_keys=False,
            indent=2,
            width=120,
        )

        if output_path:
            with Path(output_path).open("w", encoding="utf-8") as f:
                f.write(yaml_str)

        return yaml_str

    def deserialize(
        self,
        yaml_str: str | None = None,
        input_path: str | Path | None = None,
    ) -> ResourceCatalog:
        """Deserialize YAML to a catalog."""
        source = str(input_path) if input_path else None
        if input_path:
            yaml_str = self._read(input_path)

        if not yaml_str:
            raise CatalogLoadError(source, "No YAML input provided")

        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise CatalogLoadError(source, f"Invalid YAML: {e}") from e
        return self._deserialize_catalog(data, source)

    def _serialize_with_metadata(self, catalog: ResourceCatalog) -> dict[str, Any]:
        result = super()._serialize_with_metadata(catalog)
        if self.include_metadata:
            result["metadata"]["flow_style"] = self.flow_style
        return result

"""Load and save resource catalogs by file suffix."""

from __future__ import annotations

from pathlib import Path

from resdeps.resolution.catalog import ResourceCatalog
from resdeps.serialization import JsonSerializer, YamlSerializer

FORMATS = ("yaml", "json")


def _serializer(fmt: str, include_metadata: bool = True) -> JsonSerializer:
    if fmt == "json":
        return JsonSerializer(include_metadata=include_metadata)
    if fmt == "yaml":
        return YamlSerializer(include_metadata=include_metadata)
    msg = f"Unsupported catalog format: {fmt}"
    raise ValueError(msg)


def format_for_path(path: str | Path) -> str:
    """Return ``json`` for ``.json`` files and ``yaml`` for anything else."""
    return "json" if Path(path).suffix.lower() == ".json" else "yaml"


def load_catalog(path: str | Path) -> ResourceCatalog:
    """Read a catalog document from ``path``."""
    return _serializer(format_for_path(path)).deserialize(input_path=path)


def loads_catalog(text: str, fmt: str = "yaml") -> ResourceCatalog:
    """Parse a catalog document held in memory."""
    return _serializer(fmt).deserialize(text)


def dump_catalog(
    catalog: ResourceCatalog,
    fmt: str = "yaml",
    output_path: str | Path | None = None,
    include_metadata: bool = False,
) -> str:
    """Render ``catalog`` as ``fmt`` and optionally write it to ``output_path``."""
    return _serializer(fmt, include_metadata).serialize(catalog, output_path)

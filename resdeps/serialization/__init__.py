"""Catalog serialization formats."""

from .json_serializer import JsonSerializer
from .yaml_serializer import YamlSerializer

__all__ = ["JsonSerializer", "YamlSerializer"]

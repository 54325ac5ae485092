"""drush_make_parser: drush makefile をコンポーネント一覧にパースする."""

from .core.exceptions import ManifestLoadError
from .core.models import Component, Manifest, list_by_prefix, lookup_by_name
from .parser import parse, parse_text

__version__ = "0.1.0"

__all__ = [
    "parse",
    "parse_text",
    "lookup_by_name",
    "list_by_prefix",
    "Component",
    "Manifest",
    "ManifestLoadError",
]

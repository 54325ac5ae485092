"""makefile パースのコア処理群.

- 行分類（projects[...] 行 → LineShape）
- コンポーネント抽出（名前発見、ブロック化、畳み込み）
"""

from .classifier import ClassifiedLine, LineShape, classify_line
from .exceptions import ManifestLoadError
from .extractor import component_list, extract_components, find_block, fold_component, group_blocks
from .models import Component, Manifest, list_by_prefix, lookup_by_name

__all__ = [
    "classify_line",
    "ClassifiedLine",
    "LineShape",
    "component_list",
    "find_block",
    "group_blocks",
    "fold_component",
    "extract_components",
    "Component",
    "Manifest",
    "lookup_by_name",
    "list_by_prefix",
    "ManifestLoadError",
]
